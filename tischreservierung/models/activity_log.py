import enum


class ActionType(enum.Enum):
    LOGGED_IN = "Logged in"
    TABLE_RESERVED = "Reserved table"
    RESERVATION_CANCELLED = "Cancelled reservation"
    RESERVATION_UPDATED = "Updated reservation"
    ACCOUNT_CREATED = "Created account"
    RESERVE_FAILED = "Failed to reserve table"
    CANCEL_FAILED = "Failed to cancel reservation"
    UPDATE_FAILED = "Failed to update reservation"
    LOGIN_FAILED = "Failed to log in"
