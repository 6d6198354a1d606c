"""
Base generator interface for all binding targets.

A target generator owns the list of artifacts it produces and
coordinates rendering them. Every artifact of a run is rendered into
memory first and written only once all of them succeeded.
"""

import io
import os
import shutil
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..logging_config import get_logger
from .config import GeneratorConfig
from .dispatch import Artifact, SectionDispatcher
from .errors import GeneratorError
from .model import Definition, DefinitionKind, TypeModel
from .naming import NamingContext
from .patcher import FilePatcher
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class OutputError(GeneratorError):
    """Exception raised when an output file cannot be written."""

    pass


@dataclass(frozen=True)
class RenderedArtifact:
    """Fully rendered contents of one artifact, ready to be written."""

    path: Path
    content: bytes
    edited: bool  # True for merge-in-place artifacts
    definition_count: int

    @property
    def action(self) -> str:
        return "Edited" if self.edited else "Generated"


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        artifacts: List[RenderedArtifact],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            artifacts: Rendered artifacts, in production order
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.artifacts = artifacts
        self.warnings = warnings or []
        self.metadata = metadata or {}

    @property
    def paths(self) -> List[Path]:
        return [artifact.path for artifact in self.artifacts]

    def summary_lines(self) -> List[str]:
        """One confirmation line per artifact."""
        return [f"{artifact.action} {artifact.path}" for artifact in self.artifacts]


class TargetGenerator(ABC):
    """Abstract base class for all binding targets."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self.naming_context = NamingContext(
            namespace=self.config.namespace,
            root_identifier=self.config.root_identifier,
        )
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(
            self.get_template_directory(),
            filters=self.template_filters(),
            globals=self.template_globals(),
        )

    @property
    @abstractmethod
    def target_name(self) -> str:
        """Return the name of the target ecosystem (e.g., 'javascript')."""
        pass

    @property
    def description(self) -> str:
        return ""

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing section templates for this target.

        Returns:
            Path to template directory or None for in-memory templates only
        """
        return None

    def template_filters(self) -> Dict[str, Callable]:
        """Name translators exposed to the section templates."""
        return {}

    def template_globals(self) -> Dict[str, Any]:
        """Values exposed to every section template."""
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def artifacts(self, model: TypeModel) -> List[Tuple[Artifact, Sequence[Definition]]]:
        """
        List the artifacts of this target and the definitions each one renders.

        Args:
            model: Type model for the run

        Returns:
            (artifact, definitions) pairs in production order
        """
        pass

    def validate_model(self, model: TypeModel) -> List[str]:
        """
        Check the model for definitions this target will render poorly.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        for definition in model:
            if definition.kind == DefinitionKind.STRUCT and not definition.fields:
                warnings.append(f"Struct {definition.name} has no fields")
            if definition.kind == DefinitionKind.ENUM and not definition.enumerators:
                warnings.append(f"Enum {definition.name} has no enumerators")
        return warnings

    def render(
        self, artifact: Artifact, definitions: Sequence[Definition]
    ) -> RenderedArtifact:
        """
        Render one artifact into memory.

        Raises:
            GeneratorError: On a missing marker or a rendering failure
        """
        path = self.config.output_path / artifact.filename
        dispatcher = SectionDispatcher(self.template_engine)
        count = 0

        def render_body() -> str:
            nonlocal count
            buffer = io.StringIO()
            count = dispatcher.render_all(artifact, definitions, buffer)
            return buffer.getvalue()

        if artifact.merge_in_place:
            patcher = FilePatcher(self.config.marker)
            content = patcher.patch(
                path, artifact.marker_comment, render_body, artifact.closing
            )
        else:
            text = (
                dispatcher.render_header(artifact)
                + render_body()
                + dispatcher.render_footer(artifact)
            )
            content = text.encode("utf-8")

        logger.info("Rendered %s (%d definitions)", path, count)
        return RenderedArtifact(
            path=path,
            content=content,
            edited=artifact.merge_in_place,
            definition_count=count,
        )

    def plan(self, model: TypeModel) -> List[RenderedArtifact]:
        """Render every artifact of this target without writing anything."""
        return [
            self.render(artifact, definitions)
            for artifact, definitions in self.artifacts(model)
        ]

    def write(self, rendered: List[RenderedArtifact]):
        """
        Commit rendered artifacts to disk.

        Each file is written next to its target and then renamed over it,
        so a failed write never leaves a truncated output behind.

        Raises:
            OutputError: If a file cannot be written
        """
        for artifact in rendered:
            path = artifact.path
            staging = path.with_name(f".{path.name}.tmp")
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                with open(staging, "wb") as f:
                    f.write(artifact.content)
                if path.exists():
                    shutil.copymode(path, staging)
                os.replace(staging, path)
            except OSError as e:
                staging.unlink(missing_ok=True)
                raise OutputError(f"Unable to write {path}: {e}") from e
            logger.debug("Wrote %d bytes to %s", len(artifact.content), path)

    def metadata(self, model: TypeModel, dry_run: bool = False) -> Dict[str, Any]:
        return {
            "target": self.target_name,
            "namespace": self.config.namespace,
            "definition_count": len(model),
            "struct_count": len(model.structs()),
            "enum_count": len(model.enums()),
            "dry_run": dry_run,
        }

    def generate(self, model: TypeModel, dry_run: bool = False) -> GenerationResult:
        """
        Produce every artifact of this target.

        Args:
            model: Type model for the run
            dry_run: Render without writing

        Returns:
            GenerationResult listing the artifacts
        """
        return generate_bindings([self], model, dry_run)[0]


def generate_bindings(
    generators: Sequence[TargetGenerator], model: TypeModel, dry_run: bool = False
) -> List[GenerationResult]:
    """
    Run several targets against the same model as one run.

    Every target is rendered before any file is written, so a failure in
    one target leaves the outputs of all of them untouched.
    """
    planned = []
    for generator in generators:
        warnings = generator.validate_model(model)
        for warning in warnings:
            logger.warning(warning)
        planned.append((generator, generator.plan(model), warnings))

    results = []
    for generator, rendered, warnings in planned:
        if not dry_run:
            generator.write(rendered)
        results.append(
            GenerationResult(rendered, warnings, generator.metadata(model, dry_run))
        )
    return results
