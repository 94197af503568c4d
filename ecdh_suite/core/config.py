import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


def _load_env_file(env_path: Optional[Path] = None) -> None:
    # Variables already present in the environment win over the file.
    env_path = env_path or Path.cwd() / ".env"
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip().strip('"').strip("'"))


_load_env_file()


class SuiteConfig(BaseModel):
    default_curve: Literal["P224", "P256", "P384", "P521"] = Field(default="P256")
    log_level: str = Field(default="INFO")
    log_dir: str = Field(default="")
    log_console: bool = Field(default=False)
    buffer_pool_size: int = Field(default=16, ge=0)
    keygen_attempts: int = Field(default=64, gt=0)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return value

    @classmethod
    def from_env(cls) -> "SuiteConfig":
        return cls(
            default_curve=os.getenv("ECDH_SUITE_DEFAULT_CURVE", "P256"),
            log_level=os.getenv("ECDH_SUITE_LOG_LEVEL", "INFO"),
            log_dir=os.getenv("ECDH_SUITE_LOG_DIR", ""),
            log_console=os.getenv("ECDH_SUITE_LOG_CONSOLE", "0") == "1",
            buffer_pool_size=int(os.getenv("ECDH_SUITE_BUFFER_POOL_SIZE", "16")),
            keygen_attempts=int(os.getenv("ECDH_SUITE_KEYGEN_ATTEMPTS", "64")),
        )


config = SuiteConfig.from_env()
