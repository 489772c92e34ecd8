import io

import pdfplumber

from dossier.pdf.base import BasePdfRenderer
from dossier.pdf.exceptions import PdfRenderError


class PdfPlumberAdapter(BasePdfRenderer):
    """Renders PDF pages using pdfplumber."""

    def render_first_page(self, pdf_bytes: bytes, dpi: int) -> bytes:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                if not pdf.pages:
                    raise PdfRenderError("PDF has no pages")
                image = pdf.pages[0].to_image(resolution=dpi)
                buf = io.BytesIO()
                image.save(buf, format="PNG")
                return buf.getvalue()
        except PdfRenderError:
            raise
        except Exception as exc:
            raise PdfRenderError(f"pdfplumber rendering failed: {exc}") from exc
