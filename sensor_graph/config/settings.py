"""Application configuration"""
import threading
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from sensor_graph.models.schemas import to_float32

# HTTP settings
MAX_SUBMIT_BYTES = 500
ACK_TEXT = "OK"

# Client polling contract (see static/pkg/graph.js)
POLL_INTERVAL_SECONDS = 15


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or parsed"""


class Settings(BaseModel):
    """Schema of the TOML configuration file"""
    debug: bool
    port: int = Field(ge=0, le=65535)
    value_count: int = Field(ge=1)
    value_default: float = Field(allow_inf_nan=False)
    host: str = "0.0.0.0"
    static_dir: Path = Path("static")
    pkg_dir: Path = Path("static/pkg")

    @field_validator("value_default")
    @classmethod
    def single_precision(cls, value: float) -> float:
        return to_float32(value)


def load_settings(path) -> Settings:
    """Read and validate a TOML configuration file"""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"error reading config: {e}") from e

    try:
        return Settings.model_validate(tomllib.loads(raw))
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigError(f"error parsing config: {e}") from e


class SharedConfig:
    """
    Process-wide view of the settings shared by all request handlers.
    The debug flag may change at runtime, so it is read and written under a lock.
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._lock = threading.Lock()

    @property
    def settings(self) -> Settings:
        with self._lock:
            return self._settings

    @property
    def debug(self) -> bool:
        with self._lock:
            return self._settings.debug

    @debug.setter
    def debug(self, value: bool):
        with self._lock:
            self._settings = self._settings.model_copy(update={"debug": bool(value)})

    @property
    def value_count(self) -> int:
        return self._settings.value_count

    @property
    def value_default(self) -> float:
        return self._settings.value_default
