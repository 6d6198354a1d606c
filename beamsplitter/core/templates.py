"""
Template engine wrapper for binding generation.

Each target keeps one Jinja2 template per named section. A section is
rendered against a single definition (or none, for headers and footers)
and the target's naming rules are exposed as filters and globals.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
)
from jinja2 import TemplateError as JinjaTemplateError

from ..logging_config import get_logger
from .errors import GeneratorError
from .model import Definition

logger = get_logger(__name__)


class TemplateError(GeneratorError):
    """Exception raised when a section cannot be rendered."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 with code generation utilities."""

    def __init__(
        self,
        template_dir: Optional[Path] = None,
        filters: Optional[Dict[str, Callable]] = None,
        globals: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing section templates
            filters: Target-specific filters (name translators)
            globals: Target-specific template globals (derived prefixes)
        """
        self.template_dir = template_dir
        self._env = None
        self._setup_environment()

        for name, func in (filters or {}).items():
            self._env.filters[name] = func
        self._env.globals.update(globals or {})

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            # Use in-memory templates
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

        self._env.filters["indent"] = self._indent_filter
        self._env.filters["comment"] = self._comment_filter

    def render_section(
        self, section: str, definition: Optional[Definition] = None, **context: Any
    ) -> str:
        """
        Render a named section against a definition.

        Args:
            section: Template name of the section
            definition: Definition bound to ``definition`` in the template
            **context: Additional template variables

        Returns:
            Rendered section text

        Raises:
            TemplateError: If the section is missing or fails to render
        """
        try:
            template = self._env.get_template(section)
            return template.render(definition=definition, **context)
        except TemplateNotFound as e:
            raise TemplateError(f"Template section not found: {e.name}") from e
        except (JinjaTemplateError, AttributeError, TypeError, ValueError) as e:
            subject = definition.name if definition is not None else "header/footer"
            raise TemplateError(
                f"Failed to render section {section} for {subject}: {str(e)}"
            ) from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        if not isinstance(self._env.loader, DictLoader):
            # Convert to DictLoader to support in-memory templates
            self._env.loader = DictLoader({})

        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        try:
            self._env.get_template(template_name)
            return True
        except TemplateNotFound:
            return False

    # Template filters for code generation

    def _indent_filter(self, value: str, spaces: int = 4) -> str:
        """Indent all non-blank lines in a string."""
        indent = " " * spaces
        lines = str(value).split("\n")
        return "\n".join(indent + line if line.strip() else line for line in lines)

    def _comment_filter(self, value: str, style: str = "//") -> str:
        """Add comment markers to each line."""
        lines = str(value).split("\n")
        return "\n".join(f"{style} {line}" if line.strip() else style for line in lines)


def create_template_engine(
    template_dir: Optional[Path] = None,
    filters: Optional[Dict[str, Callable]] = None,
    globals: Optional[Dict[str, Any]] = None,
) -> TemplateEngine:
    """Create a template engine for a target's section directory."""
    logger.debug("Creating template engine for %s", template_dir or "<memory>")
    return TemplateEngine(template_dir, filters, globals)
