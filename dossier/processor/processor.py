import time
from collections.abc import Callable, Iterable

from dossier.config.settings import Settings
from dossier.documents.ordering import sort_results
from dossier.extraction.base import BaseExtractor
from dossier.extraction.exceptions import ExtractionError
from dossier.extraction.factory import ExtractorFactory
from dossier.logging.logger import Log
from dossier.processor.models import ExtractionResult, SourceFile

GENERIC_FAILURE_MESSAGE = "Failed to process file"

UpdateCallback = Callable[[list[ExtractionResult]], None]


class DocumentProcessor:
    """Sends uploaded files for extraction one at a time.

    Each outcome is published as soon as it is known so callers can
    recompute the profile after every file.
    """

    def __init__(
        self,
        extractor: BaseExtractor,
        settings: Settings,
        on_update: UpdateCallback | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._extractor = extractor
        self._settings = settings
        self._on_update = on_update
        self._sleep = sleep

    def process(
        self,
        files: Iterable[SourceFile],
        results: Iterable[ExtractionResult] = (),
    ) -> list[ExtractionResult]:
        """Extract every file that has no result yet and return the new collection."""
        collected = list(results)
        done = {r.file_id for r in collected}
        pending = [f for f in files if f.file_id not in done]
        if not pending:
            Log.info("No unprocessed files")
            return sort_results(collected)

        Log.info(f"Processing {len(pending)} file(s)")
        for file in pending:
            result, succeeded = self._extract_one(file)
            collected = sort_results([*collected, result])
            if self._on_update is not None:
                self._on_update(collected)
            if succeeded:
                self._sleep(self._settings.extraction_delay_seconds)

        Log.info(f"Processing finished: {len(collected)} result(s)")
        return collected

    def _extract_one(self, file: SourceFile) -> tuple[ExtractionResult, bool]:
        Log.info(f"Extracting {file.file_name} ({file.mime_type})")
        try:
            payload = self._extractor.extract(file)
        except ExtractionError as exc:
            Log.error(f"Extraction failed for {file.file_name}: {exc}")
            return self._failed(file, str(exc)), False
        except Exception as exc:
            Log.error(f"Unexpected error while extracting {file.file_name}: {exc}")
            return self._failed(file, GENERIC_FAILURE_MESSAGE), False
        return ExtractionResult(file_id=file.file_id, file_name=file.file_name, data=payload), True

    @staticmethod
    def _failed(file: SourceFile, message: str) -> ExtractionResult:
        return ExtractionResult(file_id=file.file_id, file_name=file.file_name, error=message)


def build_processor(
    settings: Settings,
    on_update: UpdateCallback | None = None,
) -> DocumentProcessor:
    """Build a DocumentProcessor with the configured extractor."""
    return DocumentProcessor(
        extractor=ExtractorFactory.create(settings),
        settings=settings,
        on_update=on_update,
    )
