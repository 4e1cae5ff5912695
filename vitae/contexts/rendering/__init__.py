"""
Rendering Context

Responsibilities:
- Holds the light/dark theme state and the document context it drives
- Renders a load state into a complete HTML page
- Manages output files and render logs

Owns: Theme state, page rendering, output management
Never: Modifies profile content or layout templates
"""

from vitae.contexts.rendering.renderer import RenderResult, render_page, render_resume
from vitae.contexts.rendering.theme import DARK, LIGHT, DocumentContext, ThemeState

__all__ = [
    "render_page",
    "render_resume",
    "RenderResult",
    "ThemeState",
    "DocumentContext",
    "LIGHT",
    "DARK",
]
