"""Runtime settings read from the environment."""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from ..storage.database import DEFAULT_DATA_DIR
from ..storage.mirror import HttpMirror, NullMirror

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Application settings."""

    data_dir: Path = Field(default=DEFAULT_DATA_DIR)
    db_path: Optional[Path] = Field(default=None, description="Overrides data_dir/progress.db")
    mirror_url: Optional[str] = Field(default=None, description="Scoreboard service root URL")
    mirror_enabled: bool = Field(default=True)
    mirror_timeout: float = Field(default=10.0, gt=0)
    log_level: str = Field(default="INFO")

    @property
    def database_path(self) -> Path:
        return self.db_path or self.data_dir / "progress.db"

    @property
    def mirror_active(self) -> bool:
        """The mirror runs only when it is enabled and configured."""
        return self.mirror_enabled and bool(self.mirror_url)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from LOOPX_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ
        """
        env = os.environ if environ is None else environ
        values: dict = {}

        if env.get("LOOPX_DATA_DIR"):
            values["data_dir"] = Path(env["LOOPX_DATA_DIR"]).expanduser()
        if env.get("LOOPX_DB_PATH"):
            values["db_path"] = Path(env["LOOPX_DB_PATH"]).expanduser()
        if env.get("LOOPX_MIRROR_URL"):
            values["mirror_url"] = env["LOOPX_MIRROR_URL"]
        if env.get("LOOPX_MIRROR_ENABLED"):
            values["mirror_enabled"] = env["LOOPX_MIRROR_ENABLED"].strip().lower() in _TRUTHY
        if env.get("LOOPX_MIRROR_TIMEOUT"):
            values["mirror_timeout"] = env["LOOPX_MIRROR_TIMEOUT"]
        if env.get("LOOPX_LOG_LEVEL"):
            values["log_level"] = env["LOOPX_LOG_LEVEL"].upper()

        return cls(**values)


def build_mirror(settings: Settings):
    """Create the remote mirror the settings ask for."""
    if not settings.mirror_active:
        logger.warning(
            "Remote scoreboard disabled or missing configuration; progress stays local."
        )
        return NullMirror()
    return HttpMirror(settings.mirror_url, timeout=settings.mirror_timeout)


def configure_logging(level: str = "INFO", handler: Optional[logging.Handler] = None) -> None:
    """Set up root logging.

    Args:
        level: Level name such as "INFO" or "DEBUG"
        handler: Handler to install instead of the default stderr one
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[handler] if handler else None,
        force=True,
    )
