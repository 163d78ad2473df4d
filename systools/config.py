from pydantic import BaseModel, ConfigDict, field_validator
import os
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Load .env file if it exists (before reading os.getenv)
_env_path = Path(__file__).resolve().parent.parent / ".env"
if _env_path.exists():
    with open(_env_path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip()
                # Only set if not already in environment (env vars take precedence)
                if key not in os.environ:
                    os.environ[key] = value


def _optional_float(val: str) -> Optional[float]:
    """Empty string means unset."""
    val = val.strip()
    return float(val) if val else None


class Settings(BaseModel):
    # defaults come from the environment, so they are validated too
    model_config = ConfigDict(validate_default=True)

    log_level: str = os.getenv("SYSTOOLS_LOG_LEVEL", "INFO").upper()

    # HTTP tools use the client defaults: no timeout unless configured
    http_timeout_s: Optional[float] = _optional_float(os.getenv("SYSTOOLS_HTTP_TIMEOUT", ""))

    # Permission bits for files created by sys.write (octal string, e.g. "644")
    write_file_mode: int = int(os.getenv("SYSTOOLS_WRITE_MODE", "644"), 8)

    # Marks a tool as implemented natively rather than by prompt text
    instructions_prefix: str = "#!"

    @field_validator("write_file_mode")
    @classmethod
    def _check_mode(cls, v: int) -> int:
        if not 0 <= v <= 0o777:
            raise ValueError(f"write_file_mode out of range: {v:o}")
        return v


settings = Settings()

logger.debug(
    f"Config: log_level={settings.log_level}, http_timeout={settings.http_timeout_s}, "
    f"write_mode={settings.write_file_mode:o}"
)
