import io
import logging

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from minifusion.config import Limits
from minifusion.errors import DocumentLoadError, PageLimitError
from minifusion.session import CandidateDocument

logger = logging.getLogger(__name__)


def read_bytes(raw_file) -> bytes:
    # UploadedFile exposes getvalue(); plain file objects only read()
    return raw_file.getvalue() if hasattr(raw_file, "getvalue") else raw_file.read()


def open_document(data: bytes, file_name: str):
    """Parse ``data`` with pypdf and return ``(reader, page_count)``.

    Encrypted files get a single attempt with the empty user password; if
    that fails the reader is kept anyway and any later access error is
    reported as a load failure.
    """
    try:
        reader = PdfReader(io.BytesIO(data))
        if reader.is_encrypted:
            try:
                reader.decrypt("")
            except Exception:
                logger.info("%s: encrypted, empty password rejected", file_name)
        page_count = len(reader.pages)
    except PdfReadError as e:
        logger.exception("Cannot read %s", file_name)
        raise DocumentLoadError(file_name) from e
    except Exception as e:
        logger.exception("Unexpected error while reading %s", file_name)
        raise DocumentLoadError(file_name) from e
    return reader, page_count


def validate(raw_file, limits: Limits, doc_id: int) -> CandidateDocument:
    name = raw_file.name
    data = read_bytes(raw_file)
    reader, page_count = open_document(data, name)

    if page_count > limits.max_pages_per_file:
        raise PageLimitError(name, page_count, limits.max_pages_per_file)

    logger.debug("Accepted %s (%d pages) as #%d", name, page_count, doc_id)
    return CandidateDocument(
        doc_id=doc_id,
        file_name=name,
        page_count=page_count,
        reader=reader,
        size=len(data),
        mime_type=getattr(raw_file, "type", None),
    )
