from typing import ClassVar

from dossier.config.settings import Settings
from dossier.extraction.base import BaseExtractor
from dossier.extraction.client_base import BaseExtractionClient
from dossier.extraction.example_client_adapter import ExampleClientAdapter
from dossier.extraction.extractor import Extractor
from dossier.extraction.openai_client_adapter import OpenAIClientAdapter
from dossier.pdf.factory import PdfRendererFactory


class ExtractorFactory:
    """Creates the configured document extractor."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseExtractor:
        """Create a configured extractor from application settings."""
        provider = settings.extraction_provider.lower()
        return Extractor(
            client=cls._create_client(provider, settings),
            model="example" if provider == "example" else settings.extraction_model_name,
            pdf_renderer=PdfRendererFactory.create(settings),
            pdf_render_dpi=settings.pdf_render_dpi,
            temperature=settings.extraction_temperature,
        )

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseExtractionClient:
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=settings.extraction_api_key,
            timeout_seconds=settings.extraction_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.extraction_base_url.strip()
            if not url:
                raise ValueError(
                    "extraction_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.extraction_base_url.strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {supported}"
        )
