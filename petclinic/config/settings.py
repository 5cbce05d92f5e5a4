"""
Runtime Configuration

Reads the application settings from environment variables once at import.

Variables:
- PETCLINIC_DATA_DIR: directory holding the SQLite database and logs
- PETCLINIC_DATABASE_URL: SQLAlchemy URL (defaults to a SQLite file in the data dir)
- PETCLINIC_LOG_LEVEL: root log level name
- PETCLINIC_SEED_PET_TYPES: seed pet type reference data on startup
"""
import os
from dataclasses import dataclass
from pathlib import Path

from petclinic.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: str = 'true') -> bool:
    """Interpret an environment variable as a boolean flag."""
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    database_url: str
    log_level: str
    seed_pet_types: bool

    @property
    def log_dir(self) -> Path:
        return self.data_dir / "logs"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith('sqlite')


def load_settings() -> Settings:
    """
    Build settings from the current environment.

    Returns:
        Settings instance with defaults applied for unset variables

    Raises:
        ConfigurationError: If PETCLINIC_LOG_LEVEL is not a logging level name
    """
    data_dir = Path(os.environ.get('PETCLINIC_DATA_DIR', Path.home() / ".petclinic"))
    database_url = os.environ.get('PETCLINIC_DATABASE_URL', f"sqlite:///{data_dir / 'petclinic.db'}")
    log_level = os.environ.get('PETCLINIC_LOG_LEVEL', 'INFO').upper()
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level '{log_level}', expected one of: {', '.join(LOG_LEVELS)}",
            setting='PETCLINIC_LOG_LEVEL',
        )

    return Settings(
        data_dir=data_dir,
        database_url=database_url,
        log_level=log_level,
        seed_pet_types=_env_flag('PETCLINIC_SEED_PET_TYPES'),
    )


settings = load_settings()
