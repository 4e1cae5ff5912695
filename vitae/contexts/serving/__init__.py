"""
Serving Context

Responsibilities:
- Exposes the liveness endpoint

Owns: HTTP liveness service
Never: Serves profile data
"""

from vitae.contexts.serving.app import app, run

__all__ = ["app", "run"]
