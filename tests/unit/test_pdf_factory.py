import pytest

from dossier.config.settings import Settings
from dossier.pdf.factory import PdfRendererFactory
from dossier.pdf.pdfplumber_adapter import PdfPlumberAdapter
from dossier.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPdfRendererFactory:
    def test_creates_pdfplumber_adapter(self) -> None:
        adapter = PdfRendererFactory.create(Settings(pdf_engine="pdfplumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        adapter = PdfRendererFactory.create(Settings(pdf_engine="pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = PdfRendererFactory.create(Settings(pdf_engine="PyMuPDF"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfRendererFactory.create(Settings(pdf_engine="unknown"))
