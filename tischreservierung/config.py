from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tischreservierung.utils.validation import ReferenceMoment


class Settings(BaseSettings):

    # App
    app_name: str = 'Tischreservierung'
    debug: bool = False

    # Tische
    table_count: int = Field(default=10, gt=0)

    # Referenzzeitpunkt für "Datum/Uhrzeit liegt nicht in der Vergangenheit"
    reference_date: str = Field(default="2025-05-19", pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
    reference_hour: int = Field(default=22, ge=0, le=23)
    reference_minute: int = Field(default=19, ge=0, le=59)

    # Logs
    activity_log_path: str = "logs.txt"
    log_dir: str = "logs"
    app_log_file: str = "app.log"
    app_log_max_bytes: int = Field(default=10_000_000, gt=0)
    app_log_backup_count: int = Field(default=5, ge=0)

    # Admin-Zugang (fest, Klartext)
    admin_username: str = "admin"
    admin_password: str = "admin123"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TISCH_",
    )

    @property
    def reference_moment(self) -> ReferenceMoment:
        return ReferenceMoment(
            date=self.reference_date,
            hour=self.reference_hour,
            minute=self.reference_minute
        )


settings = Settings()
