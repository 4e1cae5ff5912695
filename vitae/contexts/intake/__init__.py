"""
Intake Context

Responsibilities:
- Fetches the newest profile record from the data backend (Supabase or local YAML)
- Validates and defaults the raw record once, at the loader boundary
- Exposes the one-shot load as a tagged state (loading, error, populated)

Owns: Profile record types, profile sources, load state
Never: Formats or renders profile content
"""

from vitae.contexts.intake.exceptions import ProfileFetchError, ProfileValidationError
from vitae.contexts.intake.loader import (
    LOAD_FAILED,
    NO_DATA,
    LoadError,
    Loading,
    LoadState,
    Populated,
    ProfileLoader,
)
from vitae.contexts.intake.profile_data_structure import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    Profile,
    ProjectEntry,
)
from vitae.contexts.intake.sources import ProfileSource, SupabaseProfileSource, YAMLProfileSource

__all__ = [
    # Record types
    "Profile",
    "ExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    "CertificationEntry",
    # Sources
    "ProfileSource",
    "SupabaseProfileSource",
    "YAMLProfileSource",
    # Load state
    "ProfileLoader",
    "LoadState",
    "Loading",
    "LoadError",
    "Populated",
    "NO_DATA",
    "LOAD_FAILED",
    # Errors
    "ProfileFetchError",
    "ProfileValidationError",
]
