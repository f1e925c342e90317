"""
Pytest Fixtures für die Tischreservierung.

Jeder Test bekommt einen frischen Store und eine eigene Logdatei
im temporären Verzeichnis, Tests beeinflussen sich also nicht gegenseitig.
"""
import pytest

from tischreservierung.cli import ReservationCli
from tischreservierung.models.roles import Role
from tischreservierung.services.account_service import AccountDirectory
from tischreservierung.services.activity_service import ActivityLog
from tischreservierung.services.reservation_service import ReservationStore
from tischreservierung.utils.validation import ReferenceMoment


# ============ BASIS FIXTURES ============

@pytest.fixture
def reference():
    """Fester "aktueller" Zeitpunkt: 2025-05-19 22:19"""
    return ReferenceMoment(date="2025-05-19", hour=22, minute=19)


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "logs.txt"


@pytest.fixture
def activity_log(log_path, reference):
    return ActivityLog(str(log_path), clock=lambda: reference.timestamp)


@pytest.fixture
def store(activity_log, reference):
    """Leerer Store mit 10 Tischen"""
    return ReservationStore(activity_log, reference, table_count=10)


@pytest.fixture
def accounts():
    return AccountDirectory("admin", "admin123")


# ============ DATEN FIXTURES ============

@pytest.fixture
def alice_reservation(store):
    """Alice hat Tisch 4 (Index 3) reserviert -> ID 1A"""
    store.reserve_table("Alice", "123-456-7890", 2, "2025-06-01", "19:00", 3)
    return store.reservations[0]


@pytest.fixture
def alice_account(accounts):
    accounts.create(Role.CUSTOMER, "Alice", "alicepass")
    return "Alice"


# ============ CLI FIXTURES ============

class ScriptedInput:
    """Liefert vorbereitete Eingaben nacheinander; danach EOFError wie bei Strg+D."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


@pytest.fixture
def make_cli(store, accounts, activity_log):
    """
    Baut eine CLI mit Skript-Eingaben.
    Gibt (cli, output) zurück; output sammelt alle Ausgaben als Liste.
    """
    def _make(answers):
        output = []
        cli = ReservationCli(
            store,
            accounts,
            activity_log,
            input_func=ScriptedInput(answers),
            output=output.append
        )
        return cli, output
    return _make

