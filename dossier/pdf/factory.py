from dossier.config.settings import Settings
from dossier.pdf.base import BasePdfRenderer
from dossier.pdf.pdfplumber_adapter import PdfPlumberAdapter
from dossier.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfRendererFactory:
    """Creates the correct PDF renderer based on settings."""

    ADAPTERS: dict[str, type[BasePdfRenderer]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfRenderer:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
