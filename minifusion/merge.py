import io
import logging
import time
from dataclasses import dataclass, field

from pypdf import PdfWriter

from minifusion.config import PDF_MIME_TYPE
from minifusion.errors import MergeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeResult:
    data: bytes = field(repr=False)
    file_name: str
    page_count: int
    source_count: int
    mime_type: str = PDF_MIME_TYPE


def default_file_name(now=None) -> str:
    now = time.time() if now is None else now
    return f"merged_document_{int(now * 1000)}.pdf"


def merge_documents(documents, file_name=None) -> MergeResult:
    """Concatenate every page of ``documents`` into one new PDF.

    Documents are taken in the given order, pages in their original order.
    Each document's already-parsed reader is reused.
    """
    documents = list(documents)
    writer = PdfWriter()
    try:
        for doc in documents:
            for page in doc.reader.pages:
                writer.add_page(page)

        out = io.BytesIO()
        writer.write(out)
        page_count = len(writer.pages)
    except Exception as e:
        logger.exception("Merge of %d documents failed", len(documents))
        raise MergeError() from e
    finally:
        writer.close()

    result = MergeResult(
        data=out.getvalue(),
        file_name=file_name or default_file_name(),
        page_count=page_count,
        source_count=len(documents),
    )
    logger.info("Merged %d documents into %s (%d pages)",
                result.source_count, result.file_name, result.page_count)
    return result
