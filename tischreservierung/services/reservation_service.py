"""
Reservierungsverwaltung: Tischbelegung + aktive Reservierungen.

Der Store ist der einzige, der Tische und Reservierungen verändert.
Jede ändernde Aktion prüft alle Vorbedingungen, bevor sie etwas anfasst,
und schreibt danach genau eine Zeile ins Aktivitätsprotokoll.
"""
import logging
from typing import Optional

from tischreservierung.errors import (
    ReservationError,
    InvalidInput,
    InvalidReservationId,
    NotFound,
    Conflict,
    TableUnavailable,
    TableIndexOutOfRange,
)
from tischreservierung.models.activity_log import ActionType
from tischreservierung.models.reservation import Reservation, KEEP, KEEP_PARTY_SIZE, KEEP_TABLE
from tischreservierung.models.roles import Role
from tischreservierung.schemas.reservation import ReservationView, TableStatus
from tischreservierung.services.activity_service import ActivityLog
from tischreservierung.utils.security import Session
from tischreservierung.utils.validation import (
    ReferenceMoment,
    format_reservation_id,
    validate_date,
    validate_party_size,
    validate_phone_number,
    validate_reservation_id,
    validate_time,
)

logger = logging.getLogger("tischreservierung.services.reservation_service")

PHONE_ERROR = "Ungültige Telefonnummer. Format: XXX-XXX-XXXX."
PARTY_SIZE_ERROR = "Personenanzahl muss mindestens 1 sein."
DATE_ERROR = "Ungültiges Datum (Format: YYYY-MM-DD) oder Datum liegt in der Vergangenheit."
TIME_ERROR = "Ungültige Uhrzeit (Format: HH:MM) oder Uhrzeit liegt heute bereits in der Vergangenheit."
ID_ERROR = "Ungültiges Format der Reservierungs-ID. Beispiel: ID 1A."
NEW_ID_ERROR = "Ungültiges Format der neuen Reservierungs-ID. Beispiel: ID 1A."
NEW_ID_TAKEN_ERROR = "Die neue Reservierungs-ID ist bereits vergeben."
TABLE_BOOKED_ERROR = "Der gewählte Tisch ist bereits reserviert."


class ReservationStore:

    def __init__(self, activity_log: ActivityLog, reference: ReferenceMoment, table_count: int = 10):
        if table_count < 1:
            raise ValueError("table_count muss mindestens 1 sein")
        self._activity_log = activity_log
        self.reference = reference
        self._tables = [True] * table_count
        self._reservations: list[Reservation] = []
        self._next_reservation_id = 1

    # ============ LESEZUGRIFFE ============

    @property
    def table_count(self) -> int:
        return len(self._tables)

    @property
    def reservations(self) -> list[Reservation]:
        """Kopien, damit niemand außerhalb den Zustand verändert"""
        return [r.model_copy() for r in self._reservations]

    def available_table_count(self) -> int:
        return sum(1 for available in self._tables if available)

    def is_table_available(self, table_index: int) -> bool:
        self._check_table_index(table_index, f"Ungültige Tischnummer. Erlaubt: 1 bis {len(self._tables)}.")
        return self._tables[table_index]

    def view_table_availability(self) -> list[TableStatus]:
        return [
            TableStatus(number=index + 1, available=available)
            for index, available in enumerate(self._tables)
        ]

    def view_customer_reservations(self, customer_name: str) -> list[ReservationView]:
        return [
            ReservationView.from_reservation(r)
            for r in self._reservations
            if r.customer_name == customer_name
        ]

    def view_logs(self) -> list[str]:
        return self._activity_log.read_lines()

    def has_reservations(self, customer_name: str) -> bool:
        return any(r.customer_name == customer_name for r in self._reservations)

    def reservation_id_exists(self, reservation_id: str, exclude_id: str = "") -> bool:
        return any(
            r.id == reservation_id and r.id != exclude_id
            for r in self._reservations
        )

    # ============ HILFSFUNKTIONEN ============

    def _find(self, reservation_id: str, customer_name: str) -> Optional[Reservation]:
        for reservation in self._reservations:
            if reservation.belongs_to(reservation_id, customer_name):
                return reservation
        return None

    def _check_table_index(self, table_index: int, message: str) -> None:
        if table_index < 0 or table_index >= len(self._tables):
            raise TableIndexOutOfRange(message)

    def _generate_id(self) -> str:
        # Zähler läuft weiter, bis eine freie ID gefunden ist
        # (Kollision nur möglich, wenn ein Update eine künftige ID vorweggenommen hat)
        while True:
            reservation_id = format_reservation_id(self._next_reservation_id)
            self._next_reservation_id += 1
            if not self.reservation_id_exists(reservation_id):
                return reservation_id

    def _log_failure(self, actor: Session, action_type: ActionType, error: ReservationError) -> None:
        logger.info(f"{action_type.value} ({actor.role.value}: {actor.username}): {error.kind} - {error}")
        self._activity_log.log_error(actor.role, actor.username, action_type, str(error))

    # ============ ÄNDERNDE AKTIONEN ============

    def reserve_table(
        self,
        customer_name: str,
        phone_number: str,
        party_size: int,
        date: str,
        time: str,
        table_index: int,
        actor: Optional[Session] = None
    ) -> int:
        """Reserviert einen freien Tisch und gibt den (0-basierten) Tischindex zurück."""
        actor = actor or Session(Role.CUSTOMER, customer_name)
        try:
            if not validate_phone_number(phone_number):
                raise InvalidInput(PHONE_ERROR)
            if not validate_party_size(party_size):
                raise InvalidInput(PARTY_SIZE_ERROR)
            if not validate_date(date, self.reference):
                raise InvalidInput(DATE_ERROR)
            if not validate_time(time, date, self.reference):
                raise InvalidInput(TIME_ERROR)
            self._check_table_index(
                table_index, f"Ungültige Tischnummer. Erlaubt: 1 bis {len(self._tables)}."
            )
            if not self._tables[table_index]:
                raise TableUnavailable(TABLE_BOOKED_ERROR)
        except ReservationError as e:
            self._log_failure(actor, ActionType.RESERVE_FAILED, e)
            raise

        self._tables[table_index] = False
        reservation = Reservation(
            id=self._generate_id(),
            customer_name=customer_name,
            phone_number=phone_number,
            party_size=party_size,
            date=date,
            time=time,
            table_number=table_index
        )
        self._reservations.append(reservation)

        logger.info(f"Reservierung {reservation.id} angelegt: Tisch #{table_index + 1} für {customer_name}")
        self._activity_log.log_activity(
            actor.role, actor.username, ActionType.TABLE_RESERVED,
            f"#{table_index + 1} for {party_size} on {date} at {time}"
        )
        return table_index

    def cancel_reservation(self, reservation_id: str, customer_name: str, actor: Optional[Session] = None) -> None:
        """
        Storniert die Reservierung mit genau dieser ID UND diesem Kundennamen.
        Die ID allein reicht nicht als Berechtigung.
        """
        actor = actor or Session(Role.CUSTOMER, customer_name)
        try:
            if not validate_reservation_id(reservation_id):
                raise InvalidReservationId(ID_ERROR)
            reservation = self._find(reservation_id, customer_name)
            if reservation is None:
                raise NotFound("Keine passende Reservierung zum Stornieren gefunden.")
        except ReservationError as e:
            self._log_failure(actor, ActionType.CANCEL_FAILED, e)
            raise

        self._tables[reservation.table_number] = True
        self._reservations = [
            r for r in self._reservations
            if not r.belongs_to(reservation_id, customer_name)
        ]

        logger.info(f"Reservierung {reservation_id} von {customer_name} storniert")
        self._activity_log.log_activity(
            actor.role, actor.username, ActionType.RESERVATION_CANCELLED, reservation_id
        )

    def update_reservation(
        self,
        reservation_id: str,
        customer_name: str,
        new_id: str = KEEP,
        new_name: str = KEEP,
        new_phone: str = KEEP,
        new_party_size: int = KEEP_PARTY_SIZE,
        new_date: str = KEEP,
        new_time: str = KEEP,
        new_table_index: int = KEEP_TABLE,
        actor: Optional[Session] = None
    ) -> None:
        """
        Ändert eine bestehende Reservierung. Felder mit Platzhalter
        ("0", 0 bzw. -1) bleiben unverändert.

        Reihenfolge der Prüfungen:
        1. Reservierung (ID + Kunde) existiert
        2. neue ID hat gültiges Format und ist nicht vergeben
        3. Telefon, Personenanzahl, Datum, Uhrzeit
        4. neuer Tisch: im Bereich und frei; der eigene Tisch zählt als frei
        """
        actor = actor or Session(Role.CUSTOMER, customer_name)
        try:
            if not validate_reservation_id(reservation_id):
                raise InvalidReservationId(ID_ERROR)
            reservation = self._find(reservation_id, customer_name)
            if reservation is None:
                raise NotFound("Keine passende Reservierung zum Ändern gefunden.")

            if new_id != KEEP:
                if not validate_reservation_id(new_id):
                    raise InvalidInput(NEW_ID_ERROR)
                if self.reservation_id_exists(new_id, reservation_id):
                    raise Conflict(NEW_ID_TAKEN_ERROR)

            if new_phone != KEEP and not validate_phone_number(new_phone):
                raise InvalidInput(PHONE_ERROR)
            if new_party_size != KEEP_PARTY_SIZE and not validate_party_size(new_party_size):
                raise InvalidInput(PARTY_SIZE_ERROR)
            if new_date != KEEP and not validate_date(new_date, self.reference):
                raise InvalidInput(DATE_ERROR)
            time_date = new_date if new_date != KEEP else self.reference.date
            if new_time != KEEP and not validate_time(new_time, time_date, self.reference):
                raise InvalidInput(TIME_ERROR)
            # Nur das Datum ändert sich: die bisherige Uhrzeit muss am neuen Tag noch gültig sein
            if new_date != KEEP and new_time == KEEP and not validate_time(reservation.time, new_date, self.reference):
                raise InvalidInput(TIME_ERROR)

            old_table_index = reservation.table_number
            if new_table_index != KEEP_TABLE:
                self._check_table_index(new_table_index, "Ungültige neue Tischnummer.")
                # Freigeben, dann belegen; schlägt das fehl, alten Zustand wiederherstellen
                self._tables[old_table_index] = True
                if not self._tables[new_table_index]:
                    self._tables[old_table_index] = False
                    raise TableUnavailable(TABLE_BOOKED_ERROR)
                self._tables[new_table_index] = False
            else:
                new_table_index = old_table_index
        except ReservationError as e:
            self._log_failure(actor, ActionType.UPDATE_FAILED, e)
            raise

        if new_id != KEEP:
            reservation.id = new_id
        if new_name != KEEP:
            reservation.customer_name = new_name
        if new_phone != KEEP:
            reservation.phone_number = new_phone
        if new_party_size != KEEP_PARTY_SIZE:
            reservation.party_size = new_party_size
        if new_date != KEEP:
            reservation.date = new_date
        if new_time != KEEP:
            reservation.time = new_time
        reservation.table_number = new_table_index

        logger.info(f"Reservierung {reservation_id} von {customer_name} geändert")
        self._activity_log.log_activity(
            actor.role, actor.username, ActionType.RESERVATION_UPDATED, reservation_id
        )
