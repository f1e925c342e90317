from dataclasses import dataclass
from functools import wraps

from tischreservierung.errors import PermissionDenied
from tischreservierung.models.roles import Role, Operation


# Passwörter werden bewusst im Klartext verglichen
def verify_password(plain_password: str, stored_password: str) -> bool:
    return plain_password == stored_password


@dataclass(frozen=True)
class Session:
    """Wer gerade handelt: Rolle + Benutzername"""
    role: Role
    username: str


# Welche Rolle welche Aktionen sehen darf. Reihenfolge = Menüreihenfolge
ROLE_PERMISSIONS = {
    Role.CUSTOMER: (
        Operation.VIEW_OWN_RESERVATIONS,
        Operation.RESERVE_TABLE,
        Operation.VIEW_AVAILABILITY,
        Operation.UPDATE_RESERVATION,
        Operation.CANCEL_RESERVATION,
        Operation.LOGOUT,
    ),
    Role.RECEPTIONIST: (
        Operation.VIEW_LOGS,
        Operation.VIEW_AVAILABILITY,
        Operation.LOGOUT,
    ),
    Role.ADMIN: (
        Operation.VIEW_LOGS,
        Operation.VIEW_AVAILABILITY,
        Operation.UPDATE_RESERVATION,
        Operation.CANCEL_RESERVATION,
        Operation.CREATE_RECEPTIONIST,
        Operation.LOGOUT,
    ),
}


def is_allowed(role: Role, operation: Operation) -> bool:
    return operation in ROLE_PERMISSIONS.get(role, ())


# Decorator der kontrolliert ob die Rolle der Sitzung die Aktion ausführen darf
def require_operation(operation: Operation):
    def decorator(func):
        @wraps(func)
        def wrapper(self, session: Session, *args, **kwargs):
            if session is None:
                raise PermissionDenied("Nicht eingeloggt")
            if not is_allowed(session.role, operation):
                raise PermissionDenied("Keine Berechtigung")
            return func(self, session, *args, **kwargs)
        return wrapper
    return decorator
