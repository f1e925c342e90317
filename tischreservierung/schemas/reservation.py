from pydantic import BaseModel

from tischreservierung.models.reservation import Reservation, KEEP, KEEP_PARTY_SIZE, KEEP_TABLE


class ReservationView(BaseModel):
    """Anzeige einer Reservierung, Tischnummer 1-basiert"""
    id: str
    customer_name: str
    phone_number: str
    party_size: int
    date: str
    time: str
    table: int

    @classmethod
    def from_reservation(cls, reservation: Reservation) -> "ReservationView":
        return cls(
            id=reservation.id,
            customer_name=reservation.customer_name,
            phone_number=reservation.phone_number,
            party_size=reservation.party_size,
            date=reservation.date,
            time=reservation.time,
            table=reservation.table_number + 1
        )

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.customer_name}, Kontakt: {self.phone_number}, "
            f"Personen: {self.party_size}, Datum: {self.date}, Uhrzeit: {self.time}, Tisch: {self.table}"
        )


class TableStatus(BaseModel):
    number: int  # 1-basiert
    available: bool

    def __str__(self) -> str:
        return f"Tisch {self.number} ist {'FREI' if self.available else 'RESERVIERT'}"


class ReservationUpdate(BaseModel):
    """Teil-Update. Nicht gesetzte Felder behalten ihren Platzhalter und bleiben unverändert."""
    new_id: str = KEEP
    new_name: str = KEEP
    new_phone: str = KEEP
    new_party_size: int = KEEP_PARTY_SIZE
    new_date: str = KEEP
    new_time: str = KEEP
    new_table_index: int = KEEP_TABLE
