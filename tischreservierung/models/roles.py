import enum


class Role(enum.Enum):
    ADMIN = "Admin"
    RECEPTIONIST = "Rezeption"
    CUSTOMER = "Kunde"


class Operation(enum.Enum):
    VIEW_OWN_RESERVATIONS = "VIEW OWN RESERVATIONS"
    RESERVE_TABLE = "RESERVE TABLE"
    VIEW_AVAILABILITY = "VIEW AVAILABILITY"
    UPDATE_RESERVATION = "UPDATE RESERVATION"
    CANCEL_RESERVATION = "CANCEL RESERVATION"
    VIEW_LOGS = "VIEW LOGS"
    CREATE_RECEPTIONIST = "CREATE RECEPTIONIST"
    LOGOUT = "LOGOUT"
