"""AI-powered document extractor."""

import json
import re
from pathlib import Path
from typing import Any

from dossier.documents.models import DocumentPayload, RawData
from dossier.extraction.base import BaseExtractor
from dossier.extraction.client_base import BaseExtractionClient
from dossier.extraction.exceptions import ExtractionError
from dossier.extraction.prompt_loader import load_prompt_template
from dossier.extraction.validator import validate_and_build
from dossier.logging.logger import Log
from dossier.pdf.base import BasePdfRenderer
from dossier.pdf.exceptions import PdfRenderError
from dossier.processor.models import SourceFile

_PDF_MIME_TYPE = "application/pdf"
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


class Extractor(BaseExtractor):
    """Recognises a scanned document with a vision model and types the result."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        pdf_renderer: BasePdfRenderer | None = None,
        pdf_render_dpi: int = 150,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._pdf_renderer = pdf_renderer
        self._pdf_render_dpi = pdf_render_dpi
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = load_prompt_template(prompt_template_path)

    def extract(self, file: SourceFile) -> DocumentPayload:
        """Send the file to the vision model and build a typed payload."""
        image_bytes, mime_type = self._prepare_image(file)
        user_prompt = self._build_user_prompt(file)
        Log.debug(f"Extraction prompt for {file.file_name}:\n{user_prompt}")

        raw_response = self._client.create_vision_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=user_prompt,
            image_bytes=image_bytes,
            mime_type=mime_type,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        if parsed is None:
            Log.warning(f"Unparseable response for {file.file_name}, keeping raw text")
            return RawData(raw_text=raw_response)
        payload = validate_and_build(parsed)

        Log.info(f"Extraction complete: {file.file_name} recognised as {payload.type}")
        return payload

    def _prepare_image(self, file: SourceFile) -> tuple[bytes, str]:
        if file.mime_type != _PDF_MIME_TYPE:
            return file.content, file.mime_type
        if self._pdf_renderer is None:
            raise ExtractionError("A PDF renderer is required to extract from PDF files")
        try:
            png = self._pdf_renderer.render_first_page(file.content, self._pdf_render_dpi)
        except PdfRenderError as exc:
            raise ExtractionError(f"Cannot read PDF {file.file_name}: {exc}") from exc
        Log.debug(f"Rendered {file.file_name} to {len(png)} bytes of PNG")
        return png, "image/png"

    @staticmethod
    def _build_user_prompt(file: SourceFile) -> str:
        return f"Extract the document fields. File name: {file.file_name}"

    @staticmethod
    def _parse_json(raw: str) -> dict[str, Any] | None:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError:
            match = _JSON_OBJECT_RE.search(cleaned)
            if match is None:
                return None
            try:
                parsed = json.loads(match.group(0))
            except json.JSONDecodeError:
                return None

        if not isinstance(parsed, dict):
            return None
        return parsed
