from dataclasses import dataclass, field
from typing import Generic, TypeVar

from dossier.documents.models import DiplomaData, PassportData, QualificationData

UNKNOWN_CANDIDATE = "Unknown candidate"

T = TypeVar("T")


@dataclass(frozen=True)
class Slot(Generic[T]):
    """One document position in the profile and the file that last fed it."""

    data: T | None = None
    source_file_id: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.data is None


@dataclass(frozen=True)
class UserProfile:
    """Consolidated applicant profile derived from all extraction results."""

    full_name: str = UNKNOWN_CANDIDATE
    passport: Slot[PassportData] = field(default_factory=Slot)
    diploma: Slot[DiplomaData] = field(default_factory=Slot)
    qualification: Slot[QualificationData] = field(default_factory=Slot)
