"""Filtering and capacity checks for an incoming batch of files.

A raw file is anything with ``name``, ``type`` and ``getvalue()``, which is
what ``st.file_uploader`` hands back.
"""
from minifusion.config import PDF_MIME_TYPE, Limits
from minifusion.errors import FileLimitError


def is_pdf(raw_file) -> bool:
    return getattr(raw_file, "type", None) == PDF_MIME_TYPE


def split_pdfs(files):
    """Return ``(pdfs, rejected)``, both in input order."""
    pdfs, rejected = [], []
    for f in files:
        (pdfs if is_pdf(f) else rejected).append(f)
    return pdfs, rejected


def check_capacity(held: int, incoming: int, limits: Limits):
    # whole batch or nothing
    if held + incoming > limits.max_files:
        raise FileLimitError(limits.max_files)
