from abc import ABC, abstractmethod


class BasePdfRenderer(ABC):
    """Contract for all PDF rasterisation adapters."""

    @abstractmethod
    def render_first_page(self, pdf_bytes: bytes, dpi: int) -> bytes:
        """Render the first page of a PDF to PNG.

        Scanned documents arrive as single-page PDFs; the vision model only
        accepts images.

        Args:
            pdf_bytes: Raw PDF file content.
            dpi: Target resolution.

        Returns:
            PNG image bytes.

        Raises:
            PdfRenderError: if rendering fails for any reason.
        """
