"""
Documentation policy for generated JVM interfaces.

Renders javadoc/scaladoc blocks and section banners through the built-in
Jinja2 templates.
"""

from typing import List

from ...core.schema import EntityDefinition
from ...core.templates import TemplateEngine

SECTION_RULE_WIDTH = 73


class JvmDocPolicy:
    """DocPolicy producing ``/** ... */`` comments, wrapped at ``width``."""

    def __init__(self, engine: TemplateEngine, width: int = 80, enabled: bool = True):
        self.engine = engine
        self.width = width
        self.enabled = enabled

    def entity_doc(self, entity: EntityDefinition) -> List[str]:
        """Entity comment, or a description of the entity when it has none."""
        if entity.comment and entity.comment.strip():
            text = entity.comment.strip()
        else:
            label = "table" if entity.is_table else "UDT"
            text = f"The {label} <code>{entity.qualified_name}</code>."
        return self.format(text)

    def format(self, text: str) -> List[str]:
        if not self.enabled:
            return []
        rendered = self.engine.render_template(
            "doc_comment", {"text": text, "width": self.width}
        )
        return rendered.split("\n")

    def section(self, title: str) -> List[str]:
        if not self.enabled:
            return []
        rendered = self.engine.render_template(
            "section", {"title": title, "width": SECTION_RULE_WIDTH}
        )
        return rendered.split("\n")
