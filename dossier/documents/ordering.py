from collections.abc import Iterable

from dossier.documents.models import DIPLOMA, PASSPORT, QUALIFICATION, SNILS
from dossier.processor.models import ExtractionResult

_UNKNOWN_PRIORITY = 99

_PRIORITIES: dict[str, int] = {
    PASSPORT: 0,
    SNILS: 1,
    QUALIFICATION: 2,
    DIPLOMA: 3,
}


def get_document_priority(doc_type: str | None) -> int:
    """Return the display rank of a document type; lower comes first."""
    if doc_type is None:
        return _UNKNOWN_PRIORITY
    return _PRIORITIES.get(doc_type, _UNKNOWN_PRIORITY)


def sort_results(results: Iterable[ExtractionResult]) -> list[ExtractionResult]:
    """Return a new list ordered by document priority.

    Stable for equal priority. Failed results and results without data sort
    with unknown documents at the end.
    """
    return sorted(results, key=_result_priority)


def _result_priority(result: ExtractionResult) -> int:
    payload = result.payload
    return get_document_priority(payload.type if payload is not None else None)
