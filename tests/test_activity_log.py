"""
Tests für das Aktivitätsprotokoll (Logdatei, nur anhängen).
"""
import re

from tischreservierung.models.activity_log import ActionType
from tischreservierung.models.roles import Role
from tischreservierung.services.activity_service import ActivityLog


class TestActivityLog:

    def test_login_line(self, activity_log):
        activity_log.log_login(Role.ADMIN, "admin")

        assert activity_log.read_lines() == ["[2025-05-19 22:19:00] [Admin: admin] Logged in"]

    def test_activity_and_error_lines(self, activity_log):
        activity_log.log_activity(Role.CUSTOMER, "Alice", ActionType.RESERVATION_CANCELLED, "ID 1A")
        activity_log.log_error(Role.CUSTOMER, "Alice", ActionType.UPDATE_FAILED, "Kaputt.")

        assert activity_log.read_lines() == [
            "[2025-05-19 22:19:00] [Kunde: Alice] Cancelled reservation ID 1A",
            "[2025-05-19 22:19:00] [Kunde: Alice] Failed to update reservation Error: Kaputt.",
        ]

    def test_activity_without_details(self, activity_log):
        activity_log.log_activity(Role.RECEPTIONIST, "rita", ActionType.LOGGED_IN)
        assert activity_log.read_lines() == ["[2025-05-19 22:19:00] [Rezeption: rita] Logged in"]

    def test_missing_file_reads_empty(self, tmp_path):
        log = ActivityLog(str(tmp_path / "gibtsnicht.txt"))
        assert log.read_lines() == []

    def test_appends_to_existing_file(self, log_path, activity_log):
        log_path.write_text("alte Zeile\n", encoding="utf-8")

        activity_log.log_login(Role.ADMIN, "admin")

        lines = activity_log.read_lines()
        assert lines[0] == "alte Zeile"
        assert len(lines) == 2

    def test_insertion_order(self, activity_log):
        for name in ["a", "b", "c"]:
            activity_log.log_login(Role.CUSTOMER, name)
        assert [line.split("Kunde: ")[1][0] for line in activity_log.read_lines()] == ["a", "b", "c"]

    def test_system_clock_by_default(self, tmp_path):
        log = ActivityLog(str(tmp_path / "logs.txt"))
        log.log_login(Role.ADMIN, "admin")
        assert re.match(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] \[Admin: admin\] Logged in$", log.read_lines()[0])

    def test_write_error_does_not_raise(self, tmp_path, caplog):
        """Logdatei in einem nicht existierenden Verzeichnis → nur Fehler im App-Log"""
        log = ActivityLog(str(tmp_path / "fehlt" / "logs.txt"))

        log.log_login(Role.ADMIN, "admin")

        assert "nicht beschreibbar" in caplog.text
