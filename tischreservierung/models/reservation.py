from pydantic import BaseModel

# Platzhalter für "Feld nicht ändern" bei Teil-Updates
KEEP = "0"
KEEP_PARTY_SIZE = 0
KEEP_TABLE = -1


class Reservation(BaseModel):
    """
    Aktive Reservierung. Lebt nur im Speicher des ReservationStore
    und wird bei Updates direkt verändert.
    """
    id: str
    customer_name: str
    phone_number: str
    party_size: int
    date: str
    time: str
    table_number: int  # 0-basiert

    def belongs_to(self, reservation_id: str, customer_name: str) -> bool:
        return self.id == reservation_id and self.customer_name == customer_name
