"""Folds per-document extraction results into a single applicant profile.

Merge rules:
1. Results are processed in input order; failed results and results without
   data are skipped, ``raw`` documents contribute nothing.
2. The first document of a kind is adopted as is. Later documents of the
   same kind are smart-merged into it: only non-empty incoming values
   overwrite, so a poor rescan never erases a good earlier one.
3. A standalone SNILS card feeds the passport slot. Without a passport it
   creates a placeholder passport that carries only the name and SNILS.
4. The full name follows document precedence:
   passport > SNILS > diploma / qualification > placeholder.
"""

from collections.abc import Iterable
from dataclasses import dataclass, fields, replace
from typing import TypeVar

from dossier.documents.models import (
    DiplomaData,
    PassportData,
    QualificationData,
    RawData,
    SnilsData,
)
from dossier.processor.models import ExtractionResult
from dossier.profile.models import Slot, UserProfile

P = TypeVar("P", PassportData, DiplomaData, QualificationData)

# Name source ranks, higher wins.
_NAME_NONE = 0
_NAME_FALLBACK = 1
_NAME_SNILS = 2
_NAME_PASSPORT = 3


@dataclass
class _Accumulator:
    profile: UserProfile
    name_rank: int = _NAME_NONE

    def set_name(self, name: str, rank: int) -> None:
        self.profile = replace(self.profile, full_name=name)
        self.name_rank = rank


def merge_profiles(results: Iterable[ExtractionResult]) -> UserProfile:
    """Aggregate extraction results into a UserProfile.

    Pure and deterministic: the input is never mutated and the same sequence
    always yields an equal profile.
    """
    acc = _Accumulator(profile=UserProfile())
    for result in results:
        payload = result.payload
        if payload is None:
            continue
        if isinstance(payload, PassportData):
            _merge_passport(acc, payload, result.file_id)
        elif isinstance(payload, DiplomaData):
            slot = _merge_slot(acc.profile.diploma, payload, result.file_id)
            acc.profile = replace(acc.profile, diploma=slot)
            _fill_fallback_name(acc, payload)
        elif isinstance(payload, QualificationData):
            slot = _merge_slot(acc.profile.qualification, payload, result.file_id)
            acc.profile = replace(acc.profile, qualification=slot)
            _fill_fallback_name(acc, payload)
        elif isinstance(payload, SnilsData):
            _merge_snils(acc, payload, result.file_id)
        elif isinstance(payload, RawData):
            continue
        else:
            raise TypeError(f"Unsupported document payload: {type(payload).__name__}")
    return acc.profile


def smart_merge(target: P, source: P) -> P:
    """Overwrite fields of ``target`` with the non-empty values of ``source``.

    ``is_handwritten`` is sticky: once a contributing scan was handwritten,
    the merged document stays flagged.
    """
    changes: dict[str, object] = {}
    for f in fields(source):
        if f.name == "is_handwritten":
            if source.is_handwritten:
                changes[f.name] = True
            continue
        value = getattr(source, f.name)
        if value is not None and value != "":
            changes[f.name] = value
    return replace(target, **changes)


def format_full_name(last_name: str, first_name: str, middle_name: str | None) -> str:
    return f"{last_name} {first_name} {middle_name or ''}".strip()


def _merge_slot(slot: Slot[P], incoming: P, file_id: str) -> Slot[P]:
    if slot.data is None:
        return Slot(data=incoming, source_file_id=file_id)
    return Slot(data=smart_merge(slot.data, incoming), source_file_id=file_id)


def _merge_passport(acc: _Accumulator, incoming: PassportData, file_id: str) -> None:
    slot = _merge_slot(acc.profile.passport, incoming, file_id)
    acc.profile = replace(acc.profile, passport=slot)
    passport = slot.data
    if passport is not None and passport.last_name:
        acc.set_name(
            format_full_name(passport.last_name, passport.first_name, passport.middle_name),
            _NAME_PASSPORT,
        )


def _merge_snils(acc: _Accumulator, incoming: SnilsData, file_id: str) -> None:
    existing = acc.profile.passport.data
    if existing is None:
        passport = PassportData(
            last_name=incoming.last_name,
            first_name=incoming.first_name,
            middle_name=incoming.middle_name,
            snils=incoming.snils,
            registration_city="",
            registration_street="",
            registration_house="",
            registration_flat="",
            registration_date="",
            is_handwritten=incoming.is_handwritten,
        )
    else:
        changes: dict[str, object] = {}
        if incoming.snils:
            changes["snils"] = incoming.snils
        if incoming.is_handwritten:
            changes["is_handwritten"] = True
        if not existing.last_name and incoming.last_name:
            changes["last_name"] = incoming.last_name
            changes["first_name"] = incoming.first_name
            changes["middle_name"] = incoming.middle_name
        passport = replace(existing, **changes)
    acc.profile = replace(
        acc.profile,
        passport=Slot(data=passport, source_file_id=file_id),
    )
    if incoming.last_name and acc.name_rank < _NAME_SNILS:
        acc.set_name(
            format_full_name(incoming.last_name, incoming.first_name, incoming.middle_name),
            _NAME_SNILS,
        )


def _fill_fallback_name(
    acc: _Accumulator,
    incoming: DiplomaData | QualificationData,
) -> None:
    if acc.name_rank == _NAME_NONE and incoming.last_name:
        acc.set_name(
            format_full_name(incoming.last_name, incoming.first_name, incoming.middle_name),
            _NAME_FALLBACK,
        )
