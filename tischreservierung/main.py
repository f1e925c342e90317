import sys
import traceback

from tischreservierung.cli import ReservationCli
from tischreservierung.config import settings
from tischreservierung.services.account_service import AccountDirectory
from tischreservierung.services.activity_service import ActivityLog
from tischreservierung.services.reservation_service import ReservationStore
from tischreservierung.utils.logging_config import setup_logging


def build_cli() -> ReservationCli:
    """Baut genau einen Store und reicht ihn an die Oberfläche weiter."""
    reference = settings.reference_moment
    activity_log = ActivityLog(settings.activity_log_path, clock=lambda: reference.timestamp)
    store = ReservationStore(activity_log, reference, table_count=settings.table_count)
    accounts = AccountDirectory(settings.admin_username, settings.admin_password)
    return ReservationCli(store, accounts, activity_log)


def main() -> int:
    """
    Startet das Reservierungsmenü.
    Gibt Exit-Code zurück: 0 = Erfolg, 1 = Fehler
    """
    logger = setup_logging()
    logger.info(f"{settings.app_name} gestartet")

    try:
        build_cli().run()
        return 0
    except KeyboardInterrupt:
        logger.info("Abbruch durch Benutzer")
        return 0
    except Exception as e:
        logger.error(f"Unerwarteter Fehler: {e}")
        logger.error(traceback.format_exc())
        return 1
    finally:
        logger.info(f"{settings.app_name} beendet")


if __name__ == "__main__":
    sys.exit(main())
