import hashlib
from pathlib import Path
from typing import ClassVar

from dossier.processor.exceptions import FileTooLargeError, UnsupportedFileTypeError
from dossier.processor.models import SourceFile


class FileLoader:
    """Reads an uploaded scan from disk and identifies it by content hash."""

    MIME_TYPES: ClassVar[dict[str, str]] = {
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".png": "image/png",
        ".webp": "image/webp",
        ".pdf": "application/pdf",
    }

    def __init__(self, max_file_size_bytes: int) -> None:
        self._max_file_size_bytes = max_file_size_bytes

    def load(self, path: Path) -> SourceFile:
        """Read a document file.

        The file id is the SHA-256 of the content, so uploading the same scan
        twice yields the same id.

        Raises:
            FileNotFoundError: if the file does not exist.
            UnsupportedFileTypeError: if the suffix is not a supported scan type.
            FileTooLargeError: if the file exceeds the size limit.
        """
        mime_type = self.MIME_TYPES.get(path.suffix.lower())
        if mime_type is None:
            raise UnsupportedFileTypeError(
                f"file type '{path.suffix}' is not supported: {path.name}"
            )
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        size = path.stat().st_size
        if size > self._max_file_size_bytes:
            raise FileTooLargeError(
                f"{path.name} is {size} bytes, limit is {self._max_file_size_bytes}"
            )
        content = path.read_bytes()
        return SourceFile(
            file_id=hashlib.sha256(content).hexdigest(),
            file_name=path.name,
            mime_type=mime_type,
            content=content,
        )
