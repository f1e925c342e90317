import logging

from tischreservierung.models.roles import Role
from tischreservierung.utils.security import verify_password

logger = logging.getLogger("tischreservierung.services.account_service")


class AccountDirectory:
    """
    Benutzerkonten für Rezeption und Kunden (zwei getrennte Namensräume).
    Der Admin-Zugang ist fest konfiguriert und liegt nicht im Verzeichnis.
    """

    def __init__(self, admin_username: str, admin_password: str):
        self._admin_username = admin_username
        self._admin_password = admin_password
        self._accounts: dict[Role, dict[str, str]] = {
            Role.RECEPTIONIST: {},
            Role.CUSTOMER: {},
        }

    def _namespace(self, role: Role) -> dict[str, str]:
        if role not in self._accounts:
            raise ValueError(f"Für die Rolle {role.value} gibt es keine Konten")
        return self._accounts[role]

    def exists(self, role: Role, username: str) -> bool:
        if role == Role.ADMIN:
            return username == self._admin_username
        return username in self._namespace(role)

    def verify(self, role: Role, username: str, password: str) -> bool:
        if role == Role.ADMIN:
            return username == self._admin_username and verify_password(password, self._admin_password)
        accounts = self._namespace(role)
        if username not in accounts:
            return False
        return verify_password(password, accounts[username])

    def create(self, role: Role, username: str, password: str) -> bool:
        """Legt ein Konto an, falls der Name noch frei ist. Gibt False zurück, wenn er vergeben ist."""
        accounts = self._namespace(role)
        if username in accounts:
            return False
        accounts[username] = password
        logger.info(f"Konto angelegt: {role.value} {username}")
        return True
