from pathlib import Path
from typing import Any, Dict, List

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound, select_autoescape

from vitae.contexts.templating.presence import has_items, is_present
from vitae.utils.config import load_site_config

LAYOUTS_PATH = Path(__file__).resolve().parent / "layouts"
LAYOUT_TEMPLATE_NAME = "template.html.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 page layouts.

    Layouts are stored in vitae/contexts/templating/layouts/{layout_name}/template.html.jinja
    and extend the shared layouts/base.html.jinja shell. Autoescaping is on for all
    .html.jinja templates.

    Layouts gate optional fields with the `present` and `populated` tests. Values
    arrive already formatted by the composer.
    """

    def __init__(self, layouts_base_path: Path = None, config: Dict[str, Any] = None):
        """
        Initialize the template registry.

        Args:
            layouts_base_path: Base path for layout directories. Defaults to
                               vitae/contexts/templating/layouts/
            config: Site config (defaults to load_site_config())
        """
        if layouts_base_path is None:
            layouts_base_path = LAYOUTS_PATH

        self.layouts_base_path = Path(layouts_base_path)
        self.config = config if config is not None else load_site_config()
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.layouts_base_path)),
            autoescape=select_autoescape(enabled_extensions=("html", "html.jinja")),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.tests["present"] = is_present
        self.env.tests["populated"] = has_items

    def get_template(self, layout_name: str) -> Template:
        """
        Get a layout template by name, loading and caching it if necessary.

        Args:
            layout_name: Name of the layout (e.g., 'single_column')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if layout_name in self._cache:
            return self._cache[layout_name]

        template_path = f"{layout_name}/{LAYOUT_TEMPLATE_NAME}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for layout '{layout_name}' at {self.layouts_base_path / template_path}"
            ) from e

        self._cache[layout_name] = template
        return template

    def get_template_path(self, layout_name: str) -> Path:
        """
        Get the file path for a layout's template.

        Args:
            layout_name: Name of the layout (e.g., 'classic')

        Returns:
            Path to template file
        """
        return self.layouts_base_path / layout_name / LAYOUT_TEMPLATE_NAME

    def available_layouts(self) -> List[str]:
        """Names of all layout directories that contain a template, sorted."""
        return sorted(
            path.parent.name for path in self.layouts_base_path.glob(f"*/{LAYOUT_TEMPLATE_NAME}")
        )

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, layout_name: str) -> bool:
        return layout_name in self._cache
