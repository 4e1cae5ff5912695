"""
VITAE - single-page online curriculum vitae

Fetches the newest profile record from a hosted data backend and renders it
as a static HTML résumé.

Architecture:
- Intake Context: Profile fetching, record validation and load state
- Templating Context: Formatting, presence gating, section composition, layouts
- Rendering Context: Theme state, page rendering and output management
- Serving Context: Liveness endpoint
"""

__version__ = "0.1.0"
