"""
Profile Data Structures

Defines the record types for the single résumé profile fetched from the backend.
The store uses Spanish column names (nombre_completo, experiencia, ...); they are
mapped onto these types exactly once, in Profile.from_record().

Every field except the full name is optional. Absent or null collections become
empty tuples, absent mappings become empty dicts, and malformed collection items
are dropped instead of raising.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from vitae.contexts.intake.exceptions import ProfileValidationError


def _text(value: Any) -> Optional[str]:
    """Coerce a scalar to str, keeping None as None."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def _number(value: Any) -> Optional[float]:
    """Coerce a numeric-looking value to float; anything else becomes None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _flag(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def _string_list(value: Any) -> Tuple[str, ...]:
    """Normalize a list of strings, dropping nulls and blanks. Non-lists become empty."""
    if not isinstance(value, (list, tuple)):
        return ()
    items = (_text(item) for item in value if item is not None)
    return tuple(item for item in items if item.strip())


def _mapping_items(value: Any) -> Tuple[Mapping[str, Any], ...]:
    """Keep only mapping items of a list of records. Non-lists become empty."""
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(item for item in value if isinstance(item, Mapping))


def _string_mapping(value: Any) -> Dict[str, str]:
    """Normalize label -> URL mapping, preserving insertion order and dropping null URLs."""
    if not isinstance(value, Mapping):
        return {}
    return {str(label): _text(url) for label, url in value.items() if url is not None}


@dataclass(frozen=True)
class ExperienceEntry:
    """
    Single work experience entry.

    Attributes:
        company: Employer name (empresa)
        role: Job title (cargo)
        start: Start date as stored (inicio)
        end: End date as stored (fin); None means the position is ongoing
        location: Optional location (ubicacion)
        description: Optional free text (descripcion)
        achievements: Ordered achievement strings (logros)
    """

    company: str
    role: str
    start: str
    end: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    achievements: Tuple[str, ...] = ()

    @property
    def is_ongoing(self) -> bool:
        return self.end is None or not self.end.strip()

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ExperienceEntry":
        return cls(
            company=_text(record.get("empresa")) or "",
            role=_text(record.get("cargo")) or "",
            start=_text(record.get("inicio")) or "",
            end=_text(record.get("fin")),
            location=_text(record.get("ubicacion")),
            description=_text(record.get("descripcion")),
            achievements=_string_list(record.get("logros")),
        )


@dataclass(frozen=True)
class EducationEntry:
    """Education entry: institution, degree and both endpoints of the date range."""

    institution: str
    degree: str
    start: str
    end: str

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "EducationEntry":
        return cls(
            institution=_text(record.get("institucion")) or "",
            degree=_text(record.get("titulo")) or "",
            start=_text(record.get("inicio")) or "",
            end=_text(record.get("fin")) or "",
        )


@dataclass(frozen=True)
class ProjectEntry:
    """
    Project entry.

    Attributes:
        name: Project name (nombre)
        role: Role in the project (rol)
        url: Optional external link
        description: Optional free text (descripcion)
        technologies: Ordered technology tags (tecnologias), duplicates kept
    """

    name: str
    role: str
    url: Optional[str] = None
    description: Optional[str] = None
    technologies: Tuple[str, ...] = ()

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ProjectEntry":
        return cls(
            name=_text(record.get("nombre")) or "",
            role=_text(record.get("rol")) or "",
            url=_text(record.get("url")),
            description=_text(record.get("descripcion")),
            technologies=_string_list(record.get("tecnologias")),
        )


@dataclass(frozen=True)
class CertificationEntry:
    """Certification entry: name, issuing entity, optional date and credential link."""

    name: str
    issuer: str
    date: Optional[str] = None
    credential_url: Optional[str] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "CertificationEntry":
        return cls(
            name=_text(record.get("nombre")) or "",
            issuer=_text(record.get("entidad")) or "",
            date=_text(record.get("fecha")),
            credential_url=_text(record.get("credencial_url")),
        )


@dataclass(frozen=True)
class Profile:
    """
    The résumé profile, immutable once fetched.

    Attributes mirror the backend columns (see from_record for the mapping).
    Only full_name is guaranteed to be present.
    """

    full_name: str
    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    professional_title: Optional[str] = None
    summary: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    birth_date: Optional[str] = None
    nationality: Optional[str] = None
    website: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    photo_url: Optional[str] = None
    availability: Optional[str] = None
    desired_salary: Optional[float] = None
    remote_work: Optional[bool] = None
    slug: Optional[str] = None
    languages: Tuple[str, ...] = ()
    skills: Tuple[str, ...] = ()
    soft_skills: Tuple[str, ...] = ()
    interests: Tuple[str, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    certifications: Tuple[CertificationEntry, ...] = ()
    extra_links: Dict[str, str] = field(default_factory=dict)
    extra_data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Any) -> "Profile":
        """
        Build a Profile from a raw backend row.

        Args:
            record: Mapping keyed by the backend's column names

        Returns:
            Profile with every optional field defaulted

        Raises:
            ProfileValidationError: If record is not a mapping or nombre_completo is missing/blank
        """
        if not isinstance(record, Mapping):
            raise ProfileValidationError(
                f"Profile record must be a mapping, got {type(record).__name__}", record=record
            )

        full_name = _text(record.get("nombre_completo"))
        if full_name is None or not full_name.strip():
            raise ProfileValidationError("Profile record has no nombre_completo", record=record)

        salary = _number(record.get("salario_deseado"))
        extra_data = record.get("datos_extra")

        return cls(
            full_name=full_name,
            id=_text(record.get("id")),
            created_at=_text(record.get("creado_en")),
            updated_at=_text(record.get("actualizado_en")),
            professional_title=_text(record.get("titulo_profesional")),
            summary=_text(record.get("resumen")),
            email=_text(record.get("correo")),
            phone=_text(record.get("telefono")),
            location=_text(record.get("ubicacion")),
            birth_date=_text(record.get("fecha_nacimiento")),
            nationality=_text(record.get("nacionalidad")),
            website=_text(record.get("sitio_web")),
            linkedin_url=_text(record.get("linkedin_url")),
            github_url=_text(record.get("github_url")),
            portfolio_url=_text(record.get("portafolio_url")),
            photo_url=_text(record.get("foto_url")),
            availability=_text(record.get("disponibilidad")),
            desired_salary=None if salary is not None and math.isinf(salary) else salary,
            remote_work=_flag(record.get("trabajo_remoto")),
            slug=_text(record.get("slug")),
            languages=_string_list(record.get("idiomas")),
            skills=_string_list(record.get("habilidades")),
            soft_skills=_string_list(record.get("soft_skills")),
            interests=_string_list(record.get("intereses")),
            experience=tuple(
                ExperienceEntry.from_record(r) for r in _mapping_items(record.get("experiencia"))
            ),
            education=tuple(
                EducationEntry.from_record(r) for r in _mapping_items(record.get("educacion"))
            ),
            projects=tuple(
                ProjectEntry.from_record(r) for r in _mapping_items(record.get("proyectos"))
            ),
            certifications=tuple(
                CertificationEntry.from_record(r)
                for r in _mapping_items(record.get("certificaciones"))
            ),
            extra_links=_string_mapping(record.get("redes_extra")),
            extra_data=dict(extra_data) if isinstance(extra_data, Mapping) else {},
        )
