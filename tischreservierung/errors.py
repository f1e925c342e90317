"""
Fehlerklassen der Tischreservierung.

Jede Klasse trägt ein `kind`-Tag, damit die Oberfläche die Fehlerart
unterscheiden kann, ohne auf die Meldung angewiesen zu sein.
"""


class ReservationError(Exception):
    """Basisklasse aller fachlichen Fehler."""
    kind = "ReservationError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidInput(ReservationError):
    """Ein Feld besteht die Validierung nicht."""
    kind = "InvalidInput"


class NotFound(ReservationError):
    """Reservierung existiert nicht oder gehört nicht dem Aufrufer."""
    kind = "NotFound"


class Conflict(ReservationError):
    """ID oder Tisch wird bereits von einer anderen Reservierung verwendet."""
    kind = "Conflict"


class TableUnavailable(Conflict):
    """Der gewünschte Tisch ist bereits reserviert."""
    kind = "TableUnavailable"


class OutOfRange(ReservationError):
    """Tischnummer oder Menüauswahl außerhalb des gültigen Bereichs."""
    kind = "OutOfRange"


class TableIndexOutOfRange(OutOfRange, InvalidInput):
    kind = "OutOfRange"


# Eine ID mit falschem Format kann nie zu einer aktiven Reservierung gehören
class InvalidReservationId(InvalidInput, NotFound):
    kind = "InvalidInput"


class PermissionDenied(ReservationError):
    """Die Rolle der Sitzung darf diese Aktion nicht ausführen."""
    kind = "PermissionDenied"
