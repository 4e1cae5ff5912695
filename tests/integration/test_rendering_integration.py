"""
Integration tests for rendering context - renders real layouts from fixture profiles.
"""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound
from loguru import logger
from omegaconf import OmegaConf

from vitae.contexts.intake.loader import LOAD_FAILED, NO_DATA, LoadError, Loading, Populated
from vitae.contexts.intake.profile_data_structure import Profile
from vitae.contexts.intake.sources import YAMLProfileSource
from vitae.contexts.rendering import ThemeState, render_page, render_resume

FIXTURES_PATH = Path(__file__).resolve().parent.parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by render runs so they don't outlive the captured streams."""
    yield
    logger.remove()


def populated(name: str) -> Populated:
    record = OmegaConf.to_container(OmegaConf.load(FIXTURES_PATH / name), resolve=False)
    return Populated(profile=Profile.from_record(record))


@pytest.mark.integration
@pytest.mark.parametrize("layout", ["single_column", "classic"])
def test_full_profile_page(layout):
    """Test that a full profile renders every populated block."""
    html = render_page(populated("profile_full.yaml"), ThemeState(prefers_dark=True), layout)

    assert html.startswith("<!DOCTYPE html>")
    assert 'data-theme="dark"' in html
    assert '<html lang="es"' in html
    assert "Laura Gómez Restrepo" in html
    assert "Ingeniera de Software Backend" in html
    assert "Acme Data — Backend Engineer • Remoto" in html
    assert "2022-02 — Actual" in html
    assert "2019-01 — 2022-01" in html
    assert "5.000.000" in html
    assert "Mastodon" in html
    assert 'target="_blank" rel="noreferrer"' in html
    assert 'href="https://github.com/laura/tablero"' in html
    assert "/avatar.jpg" in html


@pytest.mark.integration
def test_single_column_shows_stats_and_featured():
    html = render_page(populated("profile_full.yaml"), ThemeState(prefers_dark=False), "single_column")

    assert 'id="quick_stats"' in html
    assert 'id="featured_achievements"' in html
    assert 'data-stat="experience"' in html
    assert "Lideró la migración a Python 3" in html
    assert html.count('class="featured-text"') == 6
    assert "Construido con Python + Jinja2 + Supabase" in html


@pytest.mark.integration
def test_classic_skips_stats_and_featured():
    html = render_page(populated("profile_full.yaml"), ThemeState(prefers_dark=False), "classic")

    assert 'id="quick_stats"' not in html
    assert 'id="featured_achievements"' not in html
    assert 'id="experience"' in html


@pytest.mark.integration
def test_minimal_profile_renders_only_header():
    """Test that a name-only profile renders header and stats with no optional sections."""
    state = populated("profile_minimal.yaml")

    single = render_page(state, ThemeState(prefers_dark=False), "single_column")
    assert "Ana" in single
    assert single.count('class="card section"') == 1
    assert single.count('<div class="stat-value">0</div>') == 4
    assert 'id="experience"' not in single
    assert 'id="contact"' not in single

    classic = render_page(state, ThemeState(prefers_dark=False), "classic")
    assert classic.count('class="card section"') == 0
    assert 'class="badges"' not in classic


@pytest.mark.integration
@pytest.mark.parametrize("layout", ["single_column", "classic"])
def test_error_state_page(layout):
    """Test that an error state keeps the page chrome and shows the message."""
    state = LoadError(reason=LOAD_FAILED, message="Error cargando perfil.")

    html = render_page(state, ThemeState(prefers_dark=False), layout)

    assert '<div class="card error">Error cargando perfil.</div>' in html
    assert 'id="theme-toggle"' in html
    assert 'class="title"' not in html


@pytest.mark.integration
def test_loading_state_page():
    html = render_page(Loading(), ThemeState(prefers_dark=False), "single_column")

    assert html.count('class="skeleton-line"') == 20
    assert "Cargando perfil..." in html
    assert 'class="card error"' not in html
    assert 'data-theme="light"' in html


@pytest.mark.integration
def test_profile_text_is_escaped():
    state = Populated(
        profile=Profile(full_name="Eve", summary="<script>alert(1)</script>", skills=("<b>Go</b>",))
    )

    html = render_page(state, ThemeState(prefers_dark=False), "single_column")

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "&lt;b&gt;Go&lt;/b&gt;" in html


@pytest.mark.integration
def test_theme_toggle_is_reflected_on_render():
    theme = ThemeState(prefers_dark=False)
    theme.toggle()

    html = render_page(Loading(), theme, "classic")

    assert 'data-theme="dark"' in html


@pytest.mark.integration
def test_render_resume_writes_page(tmp_path):
    """Test the full run: load from YAML, render, write."""
    output = tmp_path / "site" / "index.html"

    result = render_resume(
        YAMLProfileSource(FIXTURES_PATH / "profile_full.yaml"),
        output_path=output,
        layout="single_column",
        theme=ThemeState(prefers_dark=False),
        log_dir=tmp_path / "logs",
    )

    assert result.success
    assert result.error is None
    assert isinstance(result.state, Populated)
    assert result.output_path == output
    assert output.read_text(encoding="utf-8") == result.html
    assert (tmp_path / "logs" / "render.log").exists()


@pytest.mark.integration
def test_render_resume_no_data_writes_error_page(tmp_path):
    output = tmp_path / "index.html"

    result = render_resume(
        YAMLProfileSource(FIXTURES_PATH / "empty_list.yaml"),
        output_path=output,
        log_dir=tmp_path / "logs",
    )

    assert not result.success
    assert result.error is None
    assert result.state.reason == NO_DATA
    assert "No hay datos de perfil." in output.read_text(encoding="utf-8")


@pytest.mark.integration
def test_render_resume_invalid_profile(tmp_path):
    result = render_resume(
        YAMLProfileSource(FIXTURES_PATH / "profile_invalid.yaml"),
        output_path=tmp_path / "index.html",
        log_dir=tmp_path / "logs",
    )

    assert not result.success
    assert result.state.reason == LOAD_FAILED
    assert "Error cargando perfil." in result.html


@pytest.mark.integration
def test_render_resume_unknown_layout(tmp_path):
    """Test that a missing layout fails the run without writing anything."""
    output = tmp_path / "index.html"

    result = render_resume(
        YAMLProfileSource(FIXTURES_PATH / "profile_full.yaml"),
        output_path=output,
        layout="nonexistent_layout",
        log_dir=tmp_path / "logs",
    )

    assert not result.success
    assert "nonexistent_layout" in result.error
    assert result.output_path is None
    assert not output.exists()


@pytest.mark.integration
def test_render_page_unknown_layout_raises():
    with pytest.raises(TemplateNotFound):
        render_page(Loading(), ThemeState(prefers_dark=False), "nonexistent_layout")


@pytest.mark.integration
def test_render_resume_write_failure(tmp_path):
    """Test that an unwritable destination is reported in the result, not raised."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    result = render_resume(
        YAMLProfileSource(FIXTURES_PATH / "profile_full.yaml"),
        output_path=blocker / "index.html",
        log_dir=tmp_path / "logs",
    )

    assert not result.success
    assert result.output_path is None
    assert "Failed to write" in result.error
    assert "Laura Gómez Restrepo" in result.html
    assert isinstance(result.state, Populated)
