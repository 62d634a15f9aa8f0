import io
from dataclasses import dataclass

import pytest
from pypdf import PdfWriter
from pypdf.generic import DecodedStreamObject, NameObject

from minifusion.config import Limits, Settings
from minifusion.controller import MergeController


@dataclass
class FakeUpload:
    """Stands in for streamlit's UploadedFile."""

    name: str
    data: bytes
    type: str = "application/pdf"

    def getvalue(self):
        return self.data


def make_pdf(widths):
    """One blank page per width; widths make page order observable."""
    writer = PdfWriter()
    for w in widths:
        writer.add_blank_page(width=w, height=200)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


def make_locked_pdf(widths, content=b"0 0 m 50 50 l S"):
    """AES-128 with an owner password only, one stroked line per page."""
    writer = PdfWriter()
    for w in widths:
        page = writer.add_blank_page(width=w, height=200)
        stream = DecodedStreamObject()
        stream.set_data(content)
        page[NameObject("/Contents")] = writer._add_object(stream)
    writer.encrypt(user_password="", owner_password="owner", algorithm="AES-128")
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


@pytest.fixture
def pdf_upload():
    def _make(name, pages=1, first_width=100):
        widths = [first_width + i for i in range(pages)]
        return FakeUpload(name, make_pdf(widths))
    return _make


@pytest.fixture
def controller():
    return MergeController(Settings(limits=Limits(max_files=3, max_pages_per_file=3)))
