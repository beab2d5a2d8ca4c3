"""Configuration management for Spendbook.

Reads configuration from ~/.config/spendbook.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional
import tomllib
import tomli_w

from validation import ValidationPolicy

DEFAULT_TEAM = [
    {"first_name": "Daniel", "last_name": "Agranovsky"},
    {"first_name": "Nikol", "last_name": "Melamed"},
]


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    db_data_dir: Path
    db_filename: str
    log_level: str
    log_dir: Path
    enable_reset: bool = False
    require_positive_sum: bool = False
    year_min: Optional[int] = None
    year_max: Optional[int] = None
    missing_report_id: str = "client"  # "client" (400) or "internal" (500)
    server_host: str = "127.0.0.1"
    server_port: int = 5000
    team: List[dict] = field(default_factory=lambda: list(DEFAULT_TEAM))

    @property
    def db_path(self) -> Path:
        """Get the full database path (data_dir/filename)."""
        return self.db_data_dir / self.db_filename

    def validation_policy(self) -> ValidationPolicy:
        """Build the validation policy from the [validation] settings."""
        return ValidationPolicy(
            require_positive_sum=self.require_positive_sum,
            year_min=self.year_min,
            year_max=self.year_max,
        )

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "spendbook"
        return cls(
            base_dir=base_dir,
            db_data_dir=base_dir / "db",
            db_filename="spendbook.db",
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "spendbook.toml"


def get_migrations_dir() -> Path:
    """Get the path to the migrations directory.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "db" / "migrations"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Args:
        config_path: Optional override of the config file location.

    Returns:
        Config object with loaded or default values.

    Raises:
        ValueError: If missing_report_id is not "client" or "internal".
    """
    config_path = config_path or get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config, config_path)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "spendbook"))
    enable_reset = data.get("enable_reset", False)

    db_config = data.get("database", {})
    db_data_dir = Path(db_config.get("data_dir", base_dir / "db"))
    db_filename = db_config.get("filename", "spendbook.db")

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    validation_config = data.get("validation", {})
    missing_report_id = validation_config.get("missing_report_id", "client")
    if missing_report_id not in ("client", "internal"):
        raise ValueError(
            f"validation.missing_report_id must be 'client' or 'internal', "
            f"got {missing_report_id!r}"
        )

    server_config = data.get("server", {})
    about_config = data.get("about", {})

    return Config(
        base_dir=base_dir,
        db_data_dir=db_data_dir,
        db_filename=db_filename,
        log_level=log_level,
        log_dir=log_dir,
        enable_reset=enable_reset,
        require_positive_sum=validation_config.get("require_positive_sum", False),
        year_min=validation_config.get("year_min"),
        year_max=validation_config.get("year_max"),
        missing_report_id=missing_report_id,
        server_host=server_config.get("host", "127.0.0.1"),
        server_port=server_config.get("port", 5000),
        team=about_config.get("team", list(DEFAULT_TEAM)),
    )


def _write_config(config: Config, config_path: Path) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
        config_path: Destination file.
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)

    validation = {
        "require_positive_sum": config.require_positive_sum,
        "missing_report_id": config.missing_report_id,
    }
    # TOML has no null, so unset bounds are left out
    if config.year_min is not None:
        validation["year_min"] = config.year_min
    if config.year_max is not None:
        validation["year_max"] = config.year_max

    data = {
        "base_dir": str(config.base_dir),
        "enable_reset": config.enable_reset,
        "database": {
            "data_dir": str(config.db_data_dir),
            "filename": config.db_filename,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "validation": validation,
        "server": {
            "host": config.server_host,
            "port": config.server_port,
        },
        "about": {
            "team": config.team,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
