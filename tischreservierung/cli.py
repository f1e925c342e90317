"""
Textmenü für Admin, Rezeption und Kunden.

Sammelt Rohdaten, prüft sie mit der Validierung, fragt bei Fehlern erneut
und ruft dann den ReservationStore auf. Welche Menüpunkte eine Rolle sieht,
kommt ausschließlich aus ROLE_PERMISSIONS.
"""
import logging
from typing import Callable, Optional

from tischreservierung.errors import ReservationError
from tischreservierung.models.activity_log import ActionType
from tischreservierung.models.reservation import KEEP, KEEP_TABLE
from tischreservierung.models.roles import Role, Operation
from tischreservierung.schemas.reservation import ReservationUpdate
from tischreservierung.services.account_service import AccountDirectory
from tischreservierung.services.activity_service import ActivityLog
from tischreservierung.services.reservation_service import (
    ReservationStore,
    PHONE_ERROR,
    PARTY_SIZE_ERROR,
    DATE_ERROR,
    TIME_ERROR,
    ID_ERROR,
    NEW_ID_ERROR,
    NEW_ID_TAKEN_ERROR,
)
from tischreservierung.utils.security import Session, ROLE_PERMISSIONS, require_operation
from tischreservierung.utils.validation import (
    parse_numeric_input,
    validate_date,
    validate_phone_number,
    validate_reservation_id,
    validate_time,
)

logger = logging.getLogger("tischreservierung.cli")

MENU_LABELS = {
    Operation.VIEW_OWN_RESERVATIONS: "Meine Reservierungen anzeigen",
    Operation.RESERVE_TABLE: "Tisch reservieren",
    Operation.VIEW_AVAILABILITY: "Tischverfügbarkeit anzeigen",
    Operation.UPDATE_RESERVATION: "Reservierung ändern",
    Operation.CANCEL_RESERVATION: "Reservierung stornieren",
    Operation.VIEW_LOGS: "Protokoll anzeigen",
    Operation.CREATE_RECEPTIONIST: "Rezeptionskonto anlegen",
    Operation.LOGOUT: "Abmelden",
}

# Auswahl im Startmenü -> Rolle, 4 = Beenden
ROLE_CHOICES = {
    1: Role.ADMIN,
    2: Role.RECEPTIONIST,
    3: Role.CUSTOMER,
}

YES_ANSWERS = ("ja", "j", "yes", "y")


class ReservationCli:

    def __init__(
        self,
        store: ReservationStore,
        accounts: AccountDirectory,
        activity_log: ActivityLog,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None
    ):
        self._store = store
        self._accounts = accounts
        self._activity_log = activity_log
        self._input = input_func or input
        self._print = output or print
        self._handlers = {
            Operation.VIEW_OWN_RESERVATIONS: self.view_own_reservations,
            Operation.RESERVE_TABLE: self.reserve_table,
            Operation.VIEW_AVAILABILITY: self.view_availability,
            Operation.UPDATE_RESERVATION: self.update_reservation,
            Operation.CANCEL_RESERVATION: self.cancel_reservation,
            Operation.VIEW_LOGS: self.view_logs,
            Operation.CREATE_RECEPTIONIST: self.create_receptionist,
        }

    # ============ HAUPTSCHLEIFE ============

    def run(self) -> None:
        """Rollenauswahl -> Login -> Menü, bis "Beenden" gewählt wird oder die Eingabe endet."""
        try:
            while True:
                self._print("\n[Rollenauswahl]\n1. Admin\n2. Rezeption\n3. Kunde\n4. Beenden")
                choice = parse_numeric_input(self._input("Rolle wählen: "), 1, 4)
                if choice is None:
                    self._print("Ungültige Auswahl. Bitte genau eine Zahl von 1 bis 4 eingeben (z.B. 1, nicht 1a, 1.1 oder 1 1).")
                    continue
                if choice == 4:
                    self._print("Auf Wiedersehen!")
                    return
                session = self.login(ROLE_CHOICES[choice])
                self.session_menu(session)
        except EOFError:
            logger.info("Eingabe beendet")

    def session_menu(self, session: Session) -> None:
        operations = ROLE_PERMISSIONS[session.role]
        while True:
            self._print(f"\n[{session.role.value}-Menü - {session.username}]")
            for number, operation in enumerate(operations, start=1):
                self._print(f"{number}. {MENU_LABELS[operation]}")
            choice = parse_numeric_input(self._input("Auswahl: "), 1, len(operations))
            if choice is None:
                self._print(f"Ungültige Auswahl. Bitte genau eine Zahl von 1 bis {len(operations)} eingeben.")
                continue

            operation = operations[choice - 1]
            if operation == Operation.LOGOUT:
                if self._confirm("Abmelden? Ja oder Nein: "):
                    logger.info(f"{session.role.value} {session.username} abgemeldet")
                    return
                continue
            self._handlers[operation](session)

    # ============ LOGIN ============

    def login(self, role: Role) -> Session:
        if role == Role.CUSTOMER:
            while True:
                self._print("\n1. Kundenkonto anlegen\n2. Als Kunde anmelden")
                choice = parse_numeric_input(self._input("Auswahl: "), 1, 2)
                if choice is not None:
                    break
                self._print("Ungültige Auswahl. Bitte 1 oder 2 eingeben.")
            if choice == 1:
                return self._register_customer()

        while True:
            username = self._input(f"{role.value}-Benutzername: ")
            password = self._input("Passwort: ")
            if self._accounts.verify(role, username, password):
                break
            self._print("Ungültige Zugangsdaten. Bitte erneut versuchen.")
            self._activity_log.log_error(role, username, ActionType.LOGIN_FAILED, "Ungültige Zugangsdaten.")
        return self._start_session(role, username)

    def _register_customer(self) -> Session:
        while True:
            username = self._input("Benutzername: ")
            if not username:
                self._print("Benutzername darf nicht leer sein.")
                continue
            if self._accounts.exists(Role.CUSTOMER, username):
                self._print("Konto existiert bereits. Bitte einen anderen Benutzernamen wählen.")
                continue
            break
        password = self._input("Passwort: ")
        self._accounts.create(Role.CUSTOMER, username, password)
        self._print("Kundenkonto angelegt.")
        return self._start_session(Role.CUSTOMER, username)

    def _start_session(self, role: Role, username: str) -> Session:
        logger.info(f"{role.value} {username} angemeldet")
        self._activity_log.log_login(role, username)
        return Session(role, username)

    # ============ HILFSFUNKTIONEN ============

    def _confirm(self, prompt: str) -> bool:
        return self._input(prompt).strip().lower() in YES_ANSWERS

    def _input_error(self, session: Session, action_type: ActionType, message: str) -> None:
        self._print(f"Fehler: {message}")
        self._activity_log.log_error(session.role, session.username, action_type, message)

    def _prompt_valid(
        self,
        session: Session,
        prompt: str,
        check: Callable[[str], bool],
        message: str,
        action_type: ActionType,
        keep_allowed: bool = False
    ) -> str:
        """Fragt so lange, bis `check` die Eingabe akzeptiert (oder "0" bei keep_allowed)."""
        while True:
            value = self._input(prompt)
            if keep_allowed and value == KEEP:
                return value
            if check(value):
                return value
            self._input_error(session, action_type, message)

    def _prompt_number(
        self,
        session: Session,
        prompt: str,
        min_value: int,
        max_value: Optional[int],
        message: str,
        action_type: ActionType
    ) -> int:
        while True:
            value = parse_numeric_input(self._input(prompt), min_value, max_value)
            if value is not None:
                return value
            self._input_error(session, action_type, message)

    def _customer_for(self, session: Session) -> str:
        # Kunden handeln für sich selbst, der Admin für einen beliebigen Kunden
        if session.role == Role.CUSTOMER:
            return session.username
        return self._input("Kundenname: ")

    def _show_reservations(self, customer_name: str) -> None:
        self._print("\n--- Reservierungen ---")
        reservations = self._store.view_customer_reservations(customer_name)
        if not reservations:
            self._print("Keine Reservierungen vorhanden.")
        for reservation in reservations:
            self._print(str(reservation))

    def _show_tables(self) -> None:
        for table in self._store.view_table_availability():
            self._print(str(table))

    # ============ MENÜAKTIONEN ============

    @require_operation(Operation.VIEW_OWN_RESERVATIONS)
    def view_own_reservations(self, session: Session) -> None:
        self._show_reservations(session.username)

    @require_operation(Operation.VIEW_AVAILABILITY)
    def view_availability(self, session: Session) -> None:
        self._show_tables()

    @require_operation(Operation.VIEW_LOGS)
    def view_logs(self, session: Session) -> None:
        self._print("--- Protokoll ---\n")
        try:
            lines = self._store.view_logs()
        except OSError as e:
            logger.error(f"Protokoll nicht lesbar: {e}")
            self._print("Logdatei konnte nicht geöffnet werden.")
            return
        if not lines:
            self._print("Keine Einträge vorhanden.")
        for line in lines:
            self._print(line)

    @require_operation(Operation.RESERVE_TABLE)
    def reserve_table(self, session: Session) -> None:
        failed = ActionType.RESERVE_FAILED
        reference = self._store.reference
        table_count = self._store.table_count

        phone = self._prompt_valid(
            session, "Telefonnummer (z.B. 123-456-7890): ", validate_phone_number, PHONE_ERROR, failed
        )
        party_size = self._prompt_number(
            session, "Personenanzahl (mindestens 1): ", 1, None, PARTY_SIZE_ERROR, failed
        )
        date = self._prompt_valid(
            session,
            f"Datum (YYYY-MM-DD, frühestens {reference.date}): ",
            lambda value: validate_date(value, reference),
            DATE_ERROR,
            failed
        )
        time = self._prompt_valid(
            session,
            f"Uhrzeit (HH:MM, 24h, heute erst nach {reference.time}): ",
            lambda value: validate_time(value, date, reference),
            TIME_ERROR,
            failed
        )
        self._print("Verfügbare Tische:")
        self._show_tables()
        table_number = self._prompt_number(
            session,
            f"Tischnummer (1-{table_count}): ",
            1,
            table_count,
            f"Ungültige Tischnummer. Bitte genau eine Zahl von 1 bis {table_count} eingeben.",
            failed
        )

        try:
            table_index = self._store.reserve_table(
                session.username, phone, party_size, date, time, table_number - 1, actor=session
            )
        except ReservationError as e:
            self._print(f"Fehler: {e}")
            self._print("Reservierung fehlgeschlagen. Zurück zum Menü.")
            return
        self._print(f"Tisch #{table_index + 1} erfolgreich reserviert!")

    @require_operation(Operation.UPDATE_RESERVATION)
    def update_reservation(self, session: Session) -> None:
        failed = ActionType.UPDATE_FAILED
        reference = self._store.reference
        table_count = self._store.table_count

        customer_name = self._customer_for(session)
        if not self._store.has_reservations(customer_name):
            self._print("Keine Reservierungen vorhanden.")
            return
        self._show_reservations(customer_name)

        reservation_id = self._prompt_valid(
            session, "Reservierungs-ID zum Ändern (z.B. ID 1A): ", validate_reservation_id, ID_ERROR, failed
        )

        while True:
            new_id = self._input("Neue ID (z.B. ID 2A, 0 = unverändert): ")
            if new_id == KEEP:
                break
            if not validate_reservation_id(new_id):
                self._input_error(session, failed, NEW_ID_ERROR)
            elif self._store.reservation_id_exists(new_id, reservation_id):
                self._input_error(session, failed, NEW_ID_TAKEN_ERROR)
            else:
                break

        new_name = self._input("Neuer Name (0 = unverändert): ")
        new_phone = self._prompt_valid(
            session, "Neue Telefonnummer (z.B. 123-456-7890, 0 = unverändert): ",
            validate_phone_number, PHONE_ERROR, failed, keep_allowed=True
        )
        new_party_size = self._prompt_number(
            session, "Neue Personenanzahl (0 = unverändert): ", 0, None, PARTY_SIZE_ERROR, failed
        )
        new_date = self._prompt_valid(
            session,
            f"Neues Datum (YYYY-MM-DD, frühestens {reference.date}, 0 = unverändert): ",
            lambda value: validate_date(value, reference),
            DATE_ERROR,
            failed,
            keep_allowed=True
        )
        time_date = new_date if new_date != KEEP else reference.date
        new_time = self._prompt_valid(
            session,
            f"Neue Uhrzeit (HH:MM, heute erst nach {reference.time}, 0 = unverändert): ",
            lambda value: validate_time(value, time_date, reference),
            TIME_ERROR,
            failed,
            keep_allowed=True
        )
        self._print(f"Tisch: 0 = unverändert, oder Tischnummer (1-{table_count}):")
        self._show_tables()
        table_choice = self._prompt_number(
            session,
            "Auswahl: ",
            0,
            table_count,
            f"Ungültige Tischauswahl. Bitte genau eine Zahl von 0 bis {table_count} eingeben.",
            failed
        )

        if session.role == Role.CUSTOMER and not self._confirm("Änderung bestätigen? Ja oder Nein: "):
            self._print("Änderung abgebrochen.")
            return

        update = ReservationUpdate(
            new_id=new_id,
            new_name=new_name,
            new_phone=new_phone,
            new_party_size=new_party_size,
            new_date=new_date,
            new_time=new_time,
            new_table_index=table_choice - 1 if table_choice else KEEP_TABLE
        )
        try:
            self._store.update_reservation(reservation_id, customer_name, **update.model_dump(), actor=session)
        except ReservationError as e:
            self._print(f"Fehler: {e}")
            self._print("Änderung fehlgeschlagen. Zurück zum Menü.")
            return
        self._print("Reservierung erfolgreich geändert.")

    @require_operation(Operation.CANCEL_RESERVATION)
    def cancel_reservation(self, session: Session) -> None:
        customer_name = self._customer_for(session)
        if not self._store.has_reservations(customer_name):
            self._print("Keine Reservierungen vorhanden.")
            return

        while True:
            self._show_reservations(customer_name)
            reservation_id = self._input("Reservierungs-ID zum Stornieren (z.B. ID 1A): ")
            if session.role == Role.CUSTOMER and not self._confirm("Stornierung bestätigen? Ja oder Nein: "):
                self._print("Stornierung abgebrochen.")
                return
            try:
                self._store.cancel_reservation(reservation_id, customer_name, actor=session)
            except ReservationError as e:
                self._print(f"Fehler: {e}")
                if session.role != Role.CUSTOMER:
                    return
                self._print("Bitte erneut versuchen.")
                continue
            self._print("Reservierung storniert.")
            return

    @require_operation(Operation.CREATE_RECEPTIONIST)
    def create_receptionist(self, session: Session) -> None:
        while True:
            username = self._input("Benutzername für das neue Rezeptionskonto: ")
            if not username:
                self._print("Benutzername darf nicht leer sein.")
                continue
            if self._accounts.exists(Role.RECEPTIONIST, username):
                self._print("Benutzername existiert bereits. Bitte einen anderen wählen.")
                continue
            break
        password = self._input("Passwort: ")
        self._accounts.create(Role.RECEPTIONIST, username, password)
        self._activity_log.log_activity(
            session.role, session.username, ActionType.ACCOUNT_CREATED, f"{Role.RECEPTIONIST.value}: {username}"
        )
        self._print("Rezeptionskonto angelegt.")
