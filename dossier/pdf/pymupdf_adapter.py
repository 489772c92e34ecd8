import pymupdf

from dossier.pdf.base import BasePdfRenderer
from dossier.pdf.exceptions import PdfRenderError


class PyMuPdfAdapter(BasePdfRenderer):
    """Renders PDF pages using PyMuPDF."""

    def render_first_page(self, pdf_bytes: bytes, dpi: int) -> bytes:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.page_count == 0:
                    raise PdfRenderError("PDF has no pages")
                pixmap = doc[0].get_pixmap(dpi=dpi)
                return pixmap.tobytes("png")
        except PdfRenderError:
            raise
        except Exception as exc:
            raise PdfRenderError(f"pymupdf rendering failed: {exc}") from exc
