"""
Page Rendering Module

Turns a profile load state plus a theme into one HTML document, and orchestrates a
complete render run (load, render, write) with logging.
"""

import asyncio
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from jinja2 import TemplateError, TemplateNotFound

from vitae.contexts.intake.loader import LoadError, LoadState, Populated, ProfileLoader
from vitae.contexts.intake.sources import ProfileSource
from vitae.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    log_render_result,
    log_render_start,
    setup_rendering_logger,
)
from vitae.contexts.rendering.theme import ThemeState
from vitae.contexts.templating.composer import SectionComposer
from vitae.contexts.templating.exceptions import TemplateRenderError
from vitae.contexts.templating.logger import log_composition
from vitae.contexts.templating.template_registry import TemplateRegistry
from vitae.utils.config import load_site_config
from vitae.utils.timestamp import now, today

load_dotenv()

LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))
DEFAULT_LAYOUT = os.getenv("VITAE_LAYOUT", "single_column")
OUTPUT_FILENAME = "index.html"


@dataclass
class RenderResult:
    """
    Result of a render run.

    Attributes:
        success: Whether a populated page was rendered
        html: Rendered document ("" if rendering raised)
        state: Load state the page was rendered from
        output_path: Path the HTML was written to (None if not written)
        error: Rendering or write error message (None unless one occurred)
        log_dir: Directory holding render.log for this run
    """

    success: bool
    html: str = ""
    state: Optional[LoadState] = None
    output_path: Optional[Path] = None
    error: Optional[str] = None
    log_dir: Optional[Path] = None


def _state_kind(state: LoadState) -> str:
    if isinstance(state, Populated):
        return "populated"
    if isinstance(state, LoadError):
        return "error"
    return "loading"


def render_page(
    state: LoadState,
    theme: ThemeState,
    layout: str = DEFAULT_LAYOUT,
    registry: TemplateRegistry = None,
    config: Dict[str, Any] = None,
) -> str:
    """
    Render the page for any load state.

    - Loading: skeleton placeholders
    - LoadError: the state's message in an error banner (page chrome kept)
    - Populated: the composed profile in the requested layout

    Args:
        state: Current loader state
        theme: Theme state; its document context supplies the root attributes
        layout: Layout name (see TemplateRegistry.available_layouts())
        registry: Template registry (created from config if omitted)
        config: Site config (defaults to the registry's config)

    Returns:
        Complete HTML document

    Raises:
        TemplateNotFound: If layout doesn't exist
        TemplateRenderError: If the template fails while rendering
    """
    if registry is None:
        registry = TemplateRegistry(config=config)
    config = config if config is not None else registry.config

    page = None
    if isinstance(state, Populated):
        page = SectionComposer(config).compose(state.profile)
        log_composition(page)

    template = registry.get_template(layout)
    context = {
        "state": _state_kind(state),
        "page": page,
        "error_message": state.message if isinstance(state, LoadError) else None,
        "theme": theme.value,
        "document_attributes": theme.document.attributes,
        "config": config,
        "labels": config["labels"],
    }

    try:
        return template.render(**context)
    except TemplateError as e:
        raise TemplateRenderError(
            "Failed to render page",
            layout_name=layout,
            template_path=registry.get_template_path(layout),
            original_error=e,
        ) from e


def write_page(html: str, output_path: Path) -> Path:
    """Write the rendered document, creating parent directories."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    return output_path


def render_resume(
    source: ProfileSource,
    output_path: Optional[Path] = None,
    layout: str = DEFAULT_LAYOUT,
    theme: Optional[ThemeState] = None,
    verbose: bool = False,
    config: Dict[str, Any] = None,
    log_dir: Optional[Path] = None,
) -> RenderResult:
    """
    Load the newest profile and render it to an HTML file.

    Orchestration function: sets up a timestamped log directory, runs the one-shot
    profile load, renders the page for whatever state the load settled in and writes it.

    An error state still produces a page (error banner) and writes it, but the result
    is not successful. A layout, template or write failure is reported in the result
    instead of raising.

    Args:
        source: Profile source to load from
        output_path: HTML destination (default: RESULTS_PATH/<today>/index.html)
        layout: Layout name
        theme: Theme state (default: from the host preference)
        verbose: Dump rendered HTML to the log
        config: Site config (default: load_site_config())
        log_dir: Log directory (default: LOGS_PATH/render_<timestamp>)

    Returns:
        RenderResult with the rendered HTML and diagnostic information
    """
    config = config if config is not None else load_site_config()
    theme = theme if theme is not None else ThemeState()

    if log_dir is None:
        log_dir = LOGS_PATH / f"render_{now()}"
    setup_rendering_logger(log_dir, layout=layout, theme=theme.value)
    log_render_start(source.describe(), layout, log_dir)

    if output_path is None:
        output_path = RESULTS_PATH / today() / OUTPUT_FILENAME

    start_time = time.time()

    loader = ProfileLoader(source, messages=config["messages"])
    state = asyncio.run(loader.load())

    try:
        html = render_page(state, theme, layout=layout, config=config)
    except (TemplateNotFound, TemplateRenderError) as e:
        result = RenderResult(success=False, state=state, error=str(e), log_dir=log_dir)
        log_render_result(result, time.time() - start_time, verbose=verbose)
        return result

    try:
        written = write_page(html, output_path)
    except OSError as e:
        result = RenderResult(
            success=False,
            html=html,
            state=state,
            error=f"Failed to write {output_path}: {e}",
            log_dir=log_dir,
        )
        log_render_result(result, time.time() - start_time, verbose=verbose)
        return result

    _log_info(f"Wrote {len(html)} characters")
    _log_debug(f"  State: {type(state).__name__}")

    result = RenderResult(
        success=isinstance(state, Populated),
        html=html,
        state=state,
        output_path=written,
        log_dir=log_dir,
    )
    log_render_result(result, time.time() - start_time, verbose=verbose)
    return result
