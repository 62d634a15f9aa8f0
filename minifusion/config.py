import os
from dataclasses import dataclass, field

from minifusion.errors import ConfigError

PDF_MIME_TYPE = "application/pdf"

DEFAULT_MAX_FILES = 3
DEFAULT_MAX_PAGES = 3
DEFAULT_NOTICE_SECONDS = 5.0


@dataclass(frozen=True)
class Limits:
    max_files: int = DEFAULT_MAX_FILES
    max_pages_per_file: int = DEFAULT_MAX_PAGES

    def __post_init__(self):
        if self.max_files < 1 or self.max_pages_per_file < 1:
            raise ValueError("limits must be at least 1")


@dataclass(frozen=True)
class Settings:
    limits: Limits = field(default_factory=Limits)
    notice_ttl: float = DEFAULT_NOTICE_SECONDS
    log_level: str = "INFO"
    page_title: str = "Merge PDF"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings from ``MINIFUSION_*`` environment variables."""
        env = os.environ if environ is None else environ
        try:
            limits = Limits(
                max_files=int(env.get("MINIFUSION_MAX_FILES", str(DEFAULT_MAX_FILES))),
                max_pages_per_file=int(env.get("MINIFUSION_MAX_PAGES", str(DEFAULT_MAX_PAGES))),
            )
            notice_ttl = float(env.get("MINIFUSION_NOTICE_SECONDS", str(DEFAULT_NOTICE_SECONDS)))
        except ValueError as e:
            raise ConfigError(f"Invalid MINIFUSION setting: {e}") from e
        return cls(
            limits=limits,
            notice_ttl=notice_ttl,
            log_level=env.get("MINIFUSION_LOG_LEVEL", "INFO").upper(),
        )
