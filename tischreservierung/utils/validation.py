"""
Validierung der Rohdaten aus der Eingabe.

Alle Funktionen sind total: sie geben True/False (bzw. None) zurück und
werfen keine Exceptions. Zeitliche Prüfungen laufen gegen einen festen
Referenzzeitpunkt statt gegen die Systemuhr.
"""
import re
from dataclasses import dataclass
from typing import Optional

PHONE_PATTERN = re.compile(r"[0-9]{3}-[0-9]{3}-[0-9]{4}")
DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
TIME_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2})")
RESERVATION_ID_PATTERN = re.compile(r"ID [0-9]+A")


@dataclass(frozen=True)
class ReferenceMoment:
    """Der feste "aktuelle" Zeitpunkt, gegen den Datum und Uhrzeit geprüft werden."""
    date: str
    hour: int
    minute: int

    @property
    def time(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    @property
    def timestamp(self) -> str:
        return f"{self.date} {self.time}:00"


def validate_phone_number(phone: str) -> bool:
    return PHONE_PATTERN.fullmatch(phone) is not None


def validate_date(date: str, reference: ReferenceMoment) -> bool:
    """
    Prüft das Format YYYY-MM-DD, Monat 1-12 und Tag 1-31.
    Monatslängen und Schaltjahre werden bewusst nicht geprüft.
    Der String-Vergleich reicht, weil das Format feste Breite hat.
    """
    match = DATE_PATTERN.fullmatch(date)
    if not match:
        return False
    month, day = int(match.group(2)), int(match.group(3))
    if month < 1 or month > 12 or day < 1 or day > 31:
        return False
    return date >= reference.date


def validate_time(time: str, date: str, reference: ReferenceMoment) -> bool:
    """
    Prüft das Format HH:MM. Liegt `date` auf dem Referenztag, muss die
    Uhrzeit echt nach der Referenzuhrzeit liegen.
    """
    match = TIME_PATTERN.fullmatch(time)
    if not match:
        return False
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return False
    if date == reference.date:
        if hour < reference.hour or (hour == reference.hour and minute <= reference.minute):
            return False
    return True


def validate_party_size(size: int) -> bool:
    if isinstance(size, bool) or not isinstance(size, int):
        return False
    return size >= 1


def validate_reservation_id(reservation_id: str) -> bool:
    return RESERVATION_ID_PATTERN.fullmatch(reservation_id) is not None


def format_reservation_id(counter: int) -> str:
    return f"ID {counter}A"


def parse_numeric_input(text: str, min_value: int, max_value: Optional[int] = None) -> Optional[int]:
    """
    Wandelt eine Menü- oder Zahleneingabe in int um.
    Nur reine ASCII-Ziffern werden akzeptiert ("1a", "1.1", "1 1" und "" nicht).
    Gibt None zurück, wenn die Eingabe ungültig oder außerhalb des Bereichs ist.
    """
    if not text or not (text.isascii() and text.isdigit()):
        return None
    value = int(text)
    if value < min_value:
        return None
    if max_value is not None and value > max_value:
        return None
    return value
