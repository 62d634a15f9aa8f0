import logging
import time
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notice:
    message: str
    level: str
    expires_at: float


class NoticeBoard:
    """Holds at most one transient message.

    A new post supersedes the current one; a notice disappears on its own
    ``ttl`` seconds after it was posted.
    """

    def __init__(self, ttl: float = 5.0, clock=time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._notice = None

    def post(self, message: str, level: str = "warning") -> Notice:
        logger.warning("%s", message)
        self._notice = Notice(message, level, self._clock() + self.ttl)
        return self._notice

    def current(self) -> Optional[Notice]:
        if self._notice is not None and self._clock() >= self._notice.expires_at:
            self._notice = None
        return self._notice

    def clear(self):
        self._notice = None
