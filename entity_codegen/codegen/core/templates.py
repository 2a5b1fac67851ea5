"""
Template engine wrapper for code generation.

Renders the doc comment and section banner templates shared by the JVM
generators through an in-memory Jinja2 environment.
"""

from typing import Dict, Any

from jinja2 import (
    Environment,
    DictLoader,
    StrictUndefined,
    select_autoescape,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for a Jinja2 environment holding in-memory templates."""

    def __init__(self):
        self._env = Environment(
            loader=DictLoader({}),
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )
        self._env.filters["escape_doc"] = self._escape_doc_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of a registered template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {str(e)}")

    def add_template(self, name: str, content: str):
        """Register an in-memory template under ``name``."""
        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template can be loaded."""
        return template_name in self._env.list_templates()

    def _escape_doc_filter(self, value: str) -> str:
        """Keep free text from closing the surrounding block comment."""
        return str(value).replace("*/", "*&#47;")


# Built-in templates for doc comments shared by the JVM languages
DOC_COMMENT_TEMPLATE = """/**
{% for line in (text | escape_doc | wordwrap(width, break_long_words=False)).splitlines() %}
 *{{ " " ~ line if line else "" }}
{% endfor %}
 */"""

SECTION_TEMPLATE = """// {{ "-" * width }}
// {{ title }}
// {{ "-" * width }}"""


def create_template_engine() -> TemplateEngine:
    """Create a template engine with the built-in templates registered."""
    engine = TemplateEngine()
    engine.add_template("doc_comment", DOC_COMMENT_TEMPLATE)
    engine.add_template("section", SECTION_TEMPLATE)
    return engine
