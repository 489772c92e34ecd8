from dossier.extraction.base import BaseExtractor
from dossier.extraction.extractor import Extractor
from dossier.extraction.factory import ExtractorFactory

__all__ = ["BaseExtractor", "Extractor", "ExtractorFactory"]
