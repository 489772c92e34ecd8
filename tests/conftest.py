import io

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from document_factories import PNG_BYTES


@pytest.fixture()
def scan_pdf_bytes() -> bytes:
    """Generate a single-page PDF standing in for a scanned document."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 720, "PASSPORT OF THE RUSSIAN FEDERATION")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF (passport photo page + registration page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 720, "Photo page")
    c.showPage()
    c.drawString(72, 720, "Registration page")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    return PNG_BYTES
