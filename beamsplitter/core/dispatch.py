"""
Section dispatch for output artifacts.

An artifact names the sections that render it: an optional header,
one section per definition kind it accepts, and an optional footer.
Merge-in-place artifacts also carry the marker comment and closing
boilerplate written around the generated part.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, TextIO

from ..logging_config import get_logger
from .model import Definition, DefinitionKind
from .templates import TemplateEngine

logger = get_logger(__name__)


@dataclass(frozen=True)
class Artifact:
    """Description of one output file produced by a target."""

    filename: str
    sections: Dict[DefinitionKind, str]
    header: Optional[str] = None
    footer: Optional[str] = None

    # Merge-in-place artifacts only
    marker_comment: Optional[str] = None  # e.g. "// {marker}"
    closing: str = ""

    # Extra template variables for every section of this artifact
    context: Dict[str, Any] = field(default_factory=dict)

    @property
    def merge_in_place(self) -> bool:
        return self.marker_comment is not None

    def section_for(self, kind: DefinitionKind) -> Optional[str]:
        return self.sections.get(kind)


class SectionDispatcher:
    """Renders definitions into an artifact through its section mapping."""

    def __init__(self, engine: TemplateEngine):
        self.engine = engine

    def render(self, artifact: Artifact, definition: Definition) -> Optional[str]:
        """
        Render a definition with the section mapped to its kind.

        Args:
            artifact: Artifact being produced
            definition: Definition to render

        Returns:
            Rendered text, or None if the artifact has no section for this kind

        Raises:
            TemplateError: If rendering fails
        """
        section = artifact.section_for(definition.kind)
        if section is None:
            return None
        logger.debug("Rendering %s with %s", definition.name, section)
        return self.engine.render_section(section, definition, **artifact.context)

    def render_header(self, artifact: Artifact) -> str:
        if not artifact.header:
            return ""
        return self.engine.render_section(artifact.header, None, **artifact.context)

    def render_footer(self, artifact: Artifact) -> str:
        if not artifact.footer:
            return ""
        return self.engine.render_section(artifact.footer, None, **artifact.context)

    def render_all(
        self, artifact: Artifact, definitions: Iterable[Definition], out: TextIO
    ) -> int:
        """
        Write every applicable definition to a stream in model order.

        Returns:
            Number of definitions rendered
        """
        count = 0
        for definition in definitions:
            text = self.render(artifact, definition)
            if text is None:
                continue
            out.write(text)
            count += 1
        return count
