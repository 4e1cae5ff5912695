"""
Templating Context

Responsibilities:
- Formats leaf values (currency, dates) for display
- Applies the per-field presence gate
- Composes a Profile into an ordered, gated page structure (ResumePage)
- Manages the Jinja2 page layouts (vitae/contexts/templating/layouts/)

Owns: Display formatting, section composition, layout templates
Never: Fetches profile data or writes output files
"""

from vitae.contexts.templating.composer import (
    ResumePage,
    Section,
    SectionComposer,
    compose_page,
    featured_achievements,
    quick_stats,
)
from vitae.contexts.templating.exceptions import TemplateRenderError
from vitae.contexts.templating.formatters import format_currency, format_date
from vitae.contexts.templating.presence import has_items, is_flag_set, is_present
from vitae.contexts.templating.template_registry import TemplateRegistry

__all__ = [
    # Formatters
    "format_currency",
    "format_date",
    # Presence gate
    "is_present",
    "is_flag_set",
    "has_items",
    # Composition
    "SectionComposer",
    "compose_page",
    "quick_stats",
    "featured_achievements",
    "ResumePage",
    "Section",
    # Layouts
    "TemplateRegistry",
    "TemplateRenderError",
]
