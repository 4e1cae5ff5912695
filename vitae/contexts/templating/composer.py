"""
Section Composer

Turns a Profile into a ResumePage: an ordered, fully gated document structure that
layouts render without re-checking field presence.

Each collection becomes one Section whose blocks keep the source order (no sorting,
no deduplication). A section is only emitted when its gate passes, so a profile with
nothing but a name composes to a page with no optional sections.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from vitae.contexts.intake.profile_data_structure import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    Profile,
    ProjectEntry,
)
from vitae.contexts.templating.formatters import format_currency, format_date
from vitae.contexts.templating.presence import has_items, is_flag_set, is_present
from vitae.utils.config import load_site_config

DEFAULT_FEATURED_LIMIT = 6

# Display order of sections on the page
SECTION_ORDER = (
    "summary",
    "featured_achievements",
    "contact",
    "languages",
    "skills",
    "soft_skills",
    "interests",
    "experience",
    "education",
    "projects",
    "certifications",
    "extra_links",
)

# Sections rendered as chip/tag lists of plain strings
CHIP_SECTIONS = ("languages", "skills", "soft_skills", "interests")


@dataclass(frozen=True)
class DateRange:
    start: str
    end: str

    def __str__(self) -> str:
        return f"{self.start} — {self.end}"


@dataclass(frozen=True)
class LinkItem:
    """External link; layouts open it in a new context without referrer."""

    label: str
    href: str


@dataclass(frozen=True)
class ContactItem:
    label: str
    value: str
    href: Optional[str] = None


@dataclass(frozen=True)
class ExperienceBlock:
    company: str
    role: str
    heading: str
    date_range: DateRange
    location: Optional[str] = None
    description: Optional[str] = None
    achievements: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EducationBlock:
    institution: str
    degree: str
    date_range: DateRange


@dataclass(frozen=True)
class ProjectBlock:
    name: str
    role: str
    url: Optional[str] = None
    description: Optional[str] = None
    technologies: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CertificationBlock:
    name: str
    issuer: str
    date: Optional[str] = None
    credential_url: Optional[str] = None


@dataclass(frozen=True)
class Stat:
    key: str
    label: str
    value: int


@dataclass(frozen=True)
class FeaturedAchievement:
    company: str
    text: str


@dataclass(frozen=True)
class Section:
    """
    One labeled, independently gated block of the page.

    Attributes:
        key: Section identifier (e.g., "experience"), used by layouts to pick markup
        title: Localized section title
        icon: Decorative icon
        blocks: Ordered renderable entries (type depends on key)
    """

    key: str
    title: str
    icon: str
    blocks: Tuple[Any, ...]


@dataclass(frozen=True)
class HeaderBlock:
    full_name: str
    avatar_src: str
    initials: str
    title: Optional[str] = None
    badges: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ResumePage:
    """Composed document consumed by the layouts."""

    header: HeaderBlock
    top_links: Tuple[LinkItem, ...]
    quick_stats: Tuple[Stat, ...]
    sections: Tuple[Section, ...]
    updated: str

    def section(self, key: str) -> Optional[Section]:
        for section in self.sections:
            if section.key == key:
                return section
        return None

    @property
    def section_keys(self) -> Tuple[str, ...]:
        return tuple(section.key for section in self.sections)


# Derivations


def initials(full_name: Optional[str], placeholder: str = "🙂") -> str:
    """First letters of the first two words, upper-cased; placeholder when none."""
    parts = (full_name or "").split()
    letters = "".join(part[0].upper() for part in parts[:2])
    return letters or placeholder


def quick_stats(profile: Profile, labels: Dict[str, str]) -> Tuple[Stat, ...]:
    """
    Counts of experience, projects, certifications and skills (0 when absent).

    Only entries that pass the presence gate are counted, so a counter always matches
    the number of entries the page shows.
    """
    counts = (
        ("experience", profile.experience),
        ("projects", profile.projects),
        ("certifications", profile.certifications),
        ("skills", profile.skills),
    )
    return tuple(
        Stat(
            key=key,
            label=labels.get(key, key),
            value=sum(1 for item in items or () if is_present(item)),
        )
        for key, items in counts
    )


def featured_achievements(
    profile: Profile, limit: int = DEFAULT_FEATURED_LIMIT
) -> Tuple[FeaturedAchievement, ...]:
    """
    Flatten every experience's achievements, tagged with the company.

    Traversal follows source order (experience order, then achievement order), skips
    blank achievements and stops after `limit` entries.
    """
    featured = []
    for entry in profile.experience:
        for achievement in entry.achievements:
            if not is_present(achievement):
                continue
            if len(featured) >= limit:
                return tuple(featured)
            featured.append(FeaturedAchievement(company=entry.company, text=achievement))
    return tuple(featured)


def experience_date_range(entry: ExperienceEntry, ongoing_label: str) -> DateRange:
    """Date range whose end is the ongoing marker when the entry has no end date."""
    return DateRange(start=entry.start, end=ongoing_label if entry.is_ongoing else entry.end)


# Per-entity rules


def compose_experience(entry: ExperienceEntry, ongoing_label: str) -> ExperienceBlock:
    heading = f"{entry.company} — {entry.role}"
    location = entry.location if is_present(entry.location) else None
    if location:
        heading = f"{heading} • {location}"

    return ExperienceBlock(
        company=entry.company,
        role=entry.role,
        heading=heading,
        date_range=experience_date_range(entry, ongoing_label),
        location=location,
        description=entry.description if is_present(entry.description) else None,
        achievements=tuple(a for a in entry.achievements if is_present(a)),
    )


def compose_education(entry: EducationEntry) -> EducationBlock:
    return EducationBlock(
        institution=entry.institution,
        degree=entry.degree,
        date_range=DateRange(start=entry.start, end=entry.end),
    )


def compose_project(entry: ProjectEntry) -> ProjectBlock:
    return ProjectBlock(
        name=entry.name,
        role=entry.role,
        url=entry.url if is_present(entry.url) else None,
        description=entry.description if is_present(entry.description) else None,
        technologies=tuple(t for t in entry.technologies if is_present(t)),
    )


def compose_certification(
    entry: CertificationEntry, locale: str, date_pattern: str
) -> CertificationBlock:
    return CertificationBlock(
        name=entry.name,
        issuer=entry.issuer,
        date=format_date(entry.date, locale=locale, pattern=date_pattern) or None,
        credential_url=entry.credential_url if is_present(entry.credential_url) else None,
    )


class SectionComposer:
    """
    Composes a ResumePage from a Profile using the site configuration.

    Example:
        composer = SectionComposer()
        page = composer.compose(profile)
        [s.key for s in page.sections]  # ["summary", "contact", "experience", ...]
    """

    def __init__(self, config: Dict[str, Any] = None):
        self.config = config if config is not None else load_site_config()
        self.labels = self.config["labels"]
        self.locale = self.config.get("locale", "es_CO")
        self.currency = self.config.get("currency", "COP")
        self.date_pattern = self.config.get("date_format", "d MMM y")
        self.featured_limit = self.config.get("featured_achievements_limit", DEFAULT_FEATURED_LIMIT)

    def compose(self, profile: Profile) -> ResumePage:
        blocks_by_key = {
            "summary": (profile.summary,) if is_present(profile.summary) else (),
            "featured_achievements": featured_achievements(profile, self.featured_limit),
            "contact": self._contact_items(profile),
            "languages": self._chips(profile.languages),
            "skills": self._chips(profile.skills),
            "soft_skills": self._chips(profile.soft_skills),
            "interests": self._chips(profile.interests),
            "experience": tuple(
                compose_experience(e, self.labels["ongoing"]) for e in profile.experience
            ),
            "education": tuple(compose_education(e) for e in profile.education),
            "projects": tuple(compose_project(p) for p in profile.projects),
            "certifications": tuple(
                compose_certification(c, self.locale, self.date_pattern)
                for c in profile.certifications
            ),
            "extra_links": tuple(
                LinkItem(label=label, href=href)
                for label, href in profile.extra_links.items()
                if is_present(href)
            ),
        }

        sections = []
        for key in SECTION_ORDER:
            blocks = blocks_by_key[key]
            if not has_items(blocks):
                continue
            meta = self.config["sections"][key]
            sections.append(Section(key=key, title=meta["title"], icon=meta["icon"], blocks=blocks))

        return ResumePage(
            header=self._header(profile),
            top_links=self._top_links(profile),
            quick_stats=quick_stats(profile, self.config["stats"]),
            sections=tuple(sections),
            updated=format_date(profile.updated_at, locale=self.locale, pattern=self.date_pattern)
            or self.labels["empty_value"],
        )

    def _chips(self, items: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(item for item in items if is_present(item))

    def _header(self, profile: Profile) -> HeaderBlock:
        badges = []
        if is_present(profile.location):
            badges.append(profile.location)
        if is_flag_set(profile.remote_work):
            badges.append(self.labels["remote"])
        if is_present(profile.availability):
            badges.append(profile.availability)
        if is_present(profile.desired_salary):
            salary = format_currency(profile.desired_salary, self.currency, self.locale)
            if salary:
                badges.append(f"{self.labels['desired_salary']} {salary}")

        return HeaderBlock(
            full_name=profile.full_name,
            title=profile.professional_title if is_present(profile.professional_title) else None,
            badges=tuple(badges),
            avatar_src=profile.photo_url
            if is_present(profile.photo_url)
            else self.config["avatar_fallback"],
            initials=initials(profile.full_name, self.config.get("initials_placeholder", "🙂")),
        )

    def _top_links(self, profile: Profile) -> Tuple[LinkItem, ...]:
        links = []
        for attribute, label in self.config["top_links"].items():
            href = getattr(profile, attribute)
            if is_present(href):
                links.append(LinkItem(label=label, href=href))
        return tuple(links)

    def _contact_items(self, profile: Profile) -> Tuple[ContactItem, ...]:
        contact_labels = self.config["contact"]
        items = []

        for attribute in ("email", "phone"):
            value = getattr(profile, attribute)
            if is_present(value):
                items.append(ContactItem(label=contact_labels[attribute], value=value))

        for attribute in ("website", "linkedin_url", "github_url", "portfolio_url"):
            href = getattr(profile, attribute)
            if is_present(href):
                items.append(ContactItem(label=contact_labels[attribute], value=href, href=href))

        if is_present(profile.birth_date):
            items.append(
                ContactItem(
                    label=contact_labels["birth_date"],
                    value=format_date(profile.birth_date, self.locale, self.date_pattern),
                )
            )
        if is_present(profile.nationality):
            items.append(ContactItem(label=contact_labels["nationality"], value=profile.nationality))

        return tuple(items)


def compose_page(profile: Profile, config: Dict[str, Any] = None) -> ResumePage:
    """Compose a ResumePage with the given (or default) site config."""
    return SectionComposer(config).compose(profile)
