"""
Aktivitätsprotokoll: eine Textzeile pro Aktion, nur anhängen.
"""
import logging
import os
from datetime import datetime
from typing import Callable, Optional

from tischreservierung.models.activity_log import ActionType
from tischreservierung.models.roles import Role

logger = logging.getLogger("tischreservierung.services.activity_service")


class ActivityLog:

    def __init__(self, path: str, clock: Callable[[], str] = None):
        """
        `clock` liefert den Zeitstempel als "YYYY-MM-DD HH:MM:SS".
        Ohne clock wird die Systemuhr verwendet.
        """
        self.path = path
        self._clock = clock or (lambda: datetime.now().strftime("%Y-%m-%d %H:%M:%S"))

    def _write(self, line: str) -> None:
        # Schreibfehler brechen die eigentliche Aktion nicht ab
        try:
            with open(self.path, "a", encoding="utf-8") as log_file:
                log_file.write(line + "\n")
        except OSError as e:
            logger.error(f"Logdatei {self.path} nicht beschreibbar: {e}")

    def _prefix(self, role: Role, username: str) -> str:
        return f"[{self._clock()}] [{role.value}: {username}]"

    def log_login(self, role: Role, username: str) -> None:
        self._write(f"{self._prefix(role, username)} {ActionType.LOGGED_IN.value}")

    def log_activity(
        self,
        role: Role,
        username: str,
        action_type: ActionType,
        details: Optional[str] = None
    ) -> None:
        line = f"{self._prefix(role, username)} {action_type.value}"
        if details:
            line += f" {details}"
        self._write(line)

    def log_error(self, role: Role, username: str, action_type: ActionType, error_message: str) -> None:
        self._write(f"{self._prefix(role, username)} {action_type.value} Error: {error_message}")

    def read_lines(self) -> list[str]:
        """Alle Zeilen in Schreibreihenfolge. Fehlt die Datei, gibt es noch keine Einträge."""
        if not os.path.exists(self.path):
            return []
        with open(self.path, encoding="utf-8") as log_file:
            return [line.rstrip("\n") for line in log_file]
