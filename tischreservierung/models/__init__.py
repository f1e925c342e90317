from tischreservierung.models.roles import Role, Operation
from tischreservierung.models.activity_log import ActionType
from tischreservierung.models.reservation import Reservation, KEEP, KEEP_PARTY_SIZE, KEEP_TABLE
