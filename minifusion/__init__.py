"""Mini Fusion PDF: merge a few small PDFs in the browser."""

from minifusion.config import Limits, Settings
from minifusion.controller import MergeController
from minifusion.merge import MergeResult, merge_documents
from minifusion.session import CandidateDocument, SessionState

__version__ = "1.0.0"

__all__ = [
    "CandidateDocument",
    "Limits",
    "MergeController",
    "MergeResult",
    "SessionState",
    "Settings",
    "merge_documents",
]
