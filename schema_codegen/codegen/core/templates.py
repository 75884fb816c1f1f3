"""
Jinja2 wrapper used by the language generators.

Generators register their templates in memory; a template directory can be
given to override individual built-in templates by file name.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, StrictUndefined

from ...logging_config import get_logger

logger = get_logger(__name__)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


def quote(value: Any) -> str:
    """Double-quoted string literal with JSON escapes."""
    return json.dumps(str(value), ensure_ascii=False)


class TemplateEngine:
    """Template environment for generated source text."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory whose files take precedence over the
                in-memory templates
        """
        self.template_dir = template_dir
        self._templates: Dict[str, str] = {}

        loaders = [DictLoader(self._templates)]
        if template_dir and template_dir.exists():
            loaders.insert(0, FileSystemLoader(str(template_dir)))

        # Generated code is not HTML; undefined names are template bugs
        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self._env.filters["quote"] = quote

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a registered template.

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            logger.error("Failed to render template %s: %s", template_name, e)
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """Render template source that is not registered."""
        try:
            return self._env.from_string(template_string).render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

    def add_template(self, name: str, content: str):
        """Register an in-memory template."""
        self._templates[name] = content

    def template_exists(self, template_name: str) -> bool:
        return template_name in self._env.list_templates()


def create_template_engine(template_dir: Optional[Path] = None,
                           templates: Optional[Dict[str, str]] = None) -> TemplateEngine:
    """Create a template engine, optionally preloaded with in-memory templates."""
    engine = TemplateEngine(template_dir)
    for name, content in (templates or {}).items():
        engine.add_template(name, content)
    return engine
