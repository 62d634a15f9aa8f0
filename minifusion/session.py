import itertools
from dataclasses import dataclass, field
from typing import Any, Optional

from minifusion.config import Limits
from minifusion.errors import FileLimitError, PageLimitError


@dataclass(frozen=True)
class CandidateDocument:
    """An accepted upload, parsed once and kept for the merge."""

    doc_id: int
    file_name: str
    page_count: int
    reader: Any = field(repr=False, compare=False)
    size: int = 0
    mime_type: Optional[str] = None


class SessionState:
    """Ordered documents of one browser session; insertion order is merge order."""

    def __init__(self, limits: Limits):
        self.limits = limits
        self._docs = []
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def append(self, doc: CandidateDocument):
        if len(self._docs) >= self.limits.max_files:
            raise FileLimitError(self.limits.max_files)
        if doc.page_count > self.limits.max_pages_per_file:
            raise PageLimitError(doc.file_name, doc.page_count, self.limits.max_pages_per_file)
        self._docs.append(doc)

    def remove(self, doc_id: int) -> bool:
        before = len(self._docs)
        self._docs = [d for d in self._docs if d.doc_id != doc_id]
        return len(self._docs) != before

    def clear(self):
        self._docs = []

    @property
    def documents(self):
        return tuple(self._docs)

    @property
    def total_pages(self) -> int:
        return sum(d.page_count for d in self._docs)

    def __iter__(self):
        return iter(tuple(self._docs))

    def __len__(self):
        return len(self._docs)

    def __bool__(self):
        return bool(self._docs)
