from dataclasses import dataclass, replace
from typing import Any

from dossier.documents.models import DocumentPayload


@dataclass(frozen=True)
class SourceFile:
    """An uploaded document file ready to be sent for extraction."""

    file_id: str
    file_name: str
    mime_type: str
    content: bytes


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of analysing one source file, successful or failed."""

    file_id: str
    file_name: str
    data: DocumentPayload | None = None
    error: str | None = None

    @property
    def payload(self) -> DocumentPayload | None:
        """The extracted document, or None when extraction failed."""
        if self.error:
            return None
        return self.data


def replace_result(
    results: list[ExtractionResult],
    updated: ExtractionResult,
) -> list[ExtractionResult]:
    """Return a new list with the result for ``updated.file_id`` swapped in.

    The result is appended when no entry with that file id exists yet.
    """
    replaced = False
    out: list[ExtractionResult] = []
    for result in results:
        if result.file_id == updated.file_id:
            out.append(updated)
            replaced = True
        else:
            out.append(result)
    if not replaced:
        out.append(updated)
    return out


def remove_result(results: list[ExtractionResult], file_id: str) -> list[ExtractionResult]:
    """Return a new list without the result for ``file_id``."""
    return [r for r in results if r.file_id != file_id]


def update_fields(result: ExtractionResult, **changes: Any) -> ExtractionResult:
    """Apply a manual field edit, producing a new result.

    Raises:
        ValueError: if the result carries no document to edit.
    """
    payload = result.payload
    if payload is None:
        raise ValueError(f"Result for file {result.file_id} has no document to edit")
    if "type" in changes:
        raise ValueError("Document type cannot be edited")
    return replace(result, data=replace(payload, **changes))
