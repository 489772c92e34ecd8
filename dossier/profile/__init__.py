from dossier.profile.merger import merge_profiles
from dossier.profile.models import UNKNOWN_CANDIDATE, Slot, UserProfile

__all__ = ["UNKNOWN_CANDIDATE", "Slot", "UserProfile", "merge_profiles"]
