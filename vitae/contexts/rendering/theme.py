"""
Theme State

Light/dark theme for the rendered page, modelled as explicit state instead of an
ambient mutation of the document.

- ThemeState holds the active theme; its initial value comes from the host's
  colour-scheme preference, read once at construction.
- DocumentContext is the document-level presentation context (attributes of the
  root element). ThemeState writes to it through apply_theme() on every change,
  synchronously. Applying the same theme twice leaves it unchanged.

Nothing is persisted; a new ThemeState starts from the host preference again.
"""

import os
from typing import Callable, Dict, List, Optional

from dotenv import load_dotenv

load_dotenv()

LIGHT = "light"
DARK = "dark"
THEMES = (LIGHT, DARK)
THEME_ATTRIBUTE = "data-theme"


def detect_system_preference() -> bool:
    """True when the host reports a dark colour-scheme preference (VITAE_COLOR_SCHEME=dark)."""
    return os.getenv("VITAE_COLOR_SCHEME", "").strip().lower() == DARK


def _validate(theme: str) -> str:
    if theme not in THEMES:
        raise ValueError(f"Unknown theme '{theme}'. Valid themes: {THEMES}")
    return theme


class DocumentContext:
    """Attributes of the document's root element."""

    def __init__(self):
        self.attributes: Dict[str, str] = {}

    @property
    def theme(self) -> Optional[str]:
        return self.attributes.get(THEME_ATTRIBUTE)

    def apply_theme(self, theme: str) -> None:
        self.attributes[THEME_ATTRIBUTE] = _validate(theme)


class ThemeState:
    """
    Two-valued theme with a toggle.

    Example:
        theme = ThemeState(prefers_dark=False)
        theme.toggle()                        # "dark"
        theme.document.attributes             # {"data-theme": "dark"}
    """

    def __init__(self, prefers_dark: Optional[bool] = None, document: DocumentContext = None):
        """
        Args:
            prefers_dark: Host preference; None reads it from the environment
            document: Document context to keep in sync (a fresh one by default)
        """
        if prefers_dark is None:
            prefers_dark = detect_system_preference()

        self._value = DARK if prefers_dark else LIGHT
        self._observers: List[Callable[[str], None]] = []
        self.document = document if document is not None else DocumentContext()
        self.document.apply_theme(self._value)

    @classmethod
    def from_name(cls, theme: str, document: DocumentContext = None) -> "ThemeState":
        """Start from an explicit theme name instead of the host preference."""
        return cls(prefers_dark=_validate(theme) == DARK, document=document)

    @property
    def value(self) -> str:
        return self._value

    def subscribe(self, observer: Callable[[str], None]) -> None:
        self._observers.append(observer)

    def set(self, theme: str) -> None:
        self._value = _validate(theme)
        self.document.apply_theme(self._value)
        for observer in list(self._observers):
            observer(self._value)

    def toggle(self) -> str:
        """Flip to the other theme and return it."""
        self.set(LIGHT if self._value == DARK else DARK)
        return self._value
