"""Top-level controller: owns one session's documents, notice and result."""
import logging
import time
from typing import Optional

from minifusion import validator
from minifusion.config import Settings
from minifusion.errors import MiniFusionError, NotPdfError
from minifusion.merge import MergeResult, merge_documents
from minifusion.notices import NoticeBoard
from minifusion.session import SessionState
from minifusion.uploads import check_capacity, split_pdfs

logger = logging.getLogger(__name__)

BUSY_LABEL = "Merging..."
IDLE_LABEL = "Merge PDFs"


class MergeController:
    def __init__(self, settings: Optional[Settings] = None, clock=None):
        self.settings = settings or Settings()
        self.limits = self.settings.limits
        self.session = SessionState(self.limits)
        self.notices = NoticeBoard(self.settings.notice_ttl, clock=clock or time.monotonic)
        self.result: Optional[MergeResult] = None
        self.busy = False

    # ========= Uploads =========
    def add_files(self, files):
        """Validate a batch of raw files and append the accepted ones.

        Returns the list of documents added, in input order.
        """
        self.notices.clear()
        self.result = None

        pdfs, rejected = split_pdfs(files)
        if rejected:
            self.notices.post(str(NotPdfError()))
        if not pdfs:
            return []

        try:
            check_capacity(len(self.session), len(pdfs), self.limits)
        except MiniFusionError as e:
            self.notices.post(str(e))
            return []

        added = []
        for raw in pdfs:
            try:
                doc = validator.validate(raw, self.limits, self.session.next_id())
                self.session.append(doc)
            except MiniFusionError as e:
                self.notices.post(str(e))
                continue
            added.append(doc)
        return added

    def remove(self, doc_id: int) -> bool:
        removed = self.session.remove(doc_id)
        logger.debug("Remove #%s: %s", doc_id, "done" if removed else "unknown id")
        self.notices.clear()
        self.result = None
        return removed

    # ========= Merge =========
    @property
    def merge_enabled(self) -> bool:
        return not self.busy and len(self.session) > 0

    @property
    def merge_label(self) -> str:
        if self.busy:
            return BUSY_LABEL
        if self.session:
            return f"Merge {len(self.session)} PDFs"
        return IDLE_LABEL

    def merge(self) -> Optional[MergeResult]:
        if not self.session:
            return None

        self.busy = True
        try:
            self.result = merge_documents(self.session.documents)
        except MiniFusionError as e:
            self.notices.post(str(e))
            return None
        finally:
            self.busy = False
        return self.result
