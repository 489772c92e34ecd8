from abc import ABC, abstractmethod

from dossier.documents.models import DocumentPayload
from dossier.processor.models import SourceFile


class BaseExtractor(ABC):
    """Contract for all document extraction adapters."""

    @abstractmethod
    def extract(self, file: SourceFile) -> DocumentPayload:
        """Recognise a scanned document and extract its fields.

        Args:
            file: Uploaded image or PDF scan.

        Returns:
            The typed document payload; RawData when the response could not
            be parsed.

        Raises:
            ExtractionError: on any failure.
        """
