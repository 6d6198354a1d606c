"""
Java binding generator.

Edits one hand-maintained Java class per scope, replacing everything
below the marker line with static nested classes and enums.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ...core.config import GeneratorConfig
from ...core.dispatch import Artifact
from ...core.errors import GeneratorError
from ...core.generator import TargetGenerator
from ...core.model import Definition, DefinitionKind, TypeModel
from ...core.naming import MEMBER_ACCESS_CHAR
from ...logging_config import get_logger
from .naming import JavaNaming

logger = get_logger(__name__)


class JavaGenerator(TargetGenerator):
    """Code generator for Java nested classes and enums."""

    @property
    def target_name(self) -> str:
        return "java"

    @property
    def description(self) -> str:
        return "Static nested classes and enums patched into Java classes"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Java templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    def class_scopes(self, model: TypeModel) -> List[Tuple[str, str, TypeModel]]:
        """
        Group definitions by the Java class that will hold them.

        A configured class (or the namespace) takes every definition.
        Otherwise each outermost scope of the qualified names is a class.

        Returns:
            (class name, native scope, definitions) triples

        Raises:
            GeneratorError: If a definition has no enclosing scope
        """
        classname = self.config.java_class or self.config.namespace
        if classname:
            return [(classname, self.config.namespace or classname, model)]

        for definition in model:
            if len(definition.segments) < 2:
                raise GeneratorError(
                    f"Cannot place {definition.name} in a Java class: "
                    f"set a namespace or java_class"
                )
        return [(scope, scope, model.in_scope(scope)) for scope in model.scopes()]

    def java_names(self, classname: str, scoped: TypeModel) -> Dict[str, str]:
        """
        Java path of every definition inside its class.

        Nested definitions live inside their parent struct, everything else
        is a direct member of the class.

        Raises:
            GeneratorError: If two definitions would get the same Java path
        """
        names: Dict[str, str] = {}

        def path_of(definition: Definition) -> str:
            if definition.name not in names:
                if scoped.is_nested(definition):
                    parent = scoped.get(definition.parent_name)
                    names[definition.name] = (
                        path_of(parent) + MEMBER_ACCESS_CHAR + definition.leaf_name
                    )
                else:
                    names[definition.name] = definition.leaf_name
            return names[definition.name]

        owners: Dict[str, str] = {}
        for definition in scoped:
            path = path_of(definition)
            if path in owners:
                raise GeneratorError(
                    f"{owners[path]} and {definition.name} would both be "
                    f"{classname}.{path} in Java: generate them into separate classes"
                )
            owners[path] = definition.name
        return names

    def artifacts(self, model: TypeModel) -> List[Tuple[Artifact, Sequence[Definition]]]:
        result = []
        for classname, scope, scoped in self.class_scopes(model):
            naming = JavaNaming(scope, self.java_names(classname, scoped))
            top_level = [d for d in scoped if not scoped.is_nested(d)]
            logger.debug(
                "Java class %s: %d definitions, %d top level",
                classname,
                len(scoped),
                len(top_level),
            )
            artifact = Artifact(
                filename=f"{classname}.java",
                sections={
                    DefinitionKind.STRUCT: "class_struct.java.j2",
                    DefinitionKind.ENUM: "class_enum.java.j2",
                },
                marker_comment="    // {marker}",
                closing="}\n",
                context={"java": naming, "children": scoped.children_of},
            )
            result.append((artifact, top_level))
        return result


def create_java_generator(
    java_class: str = "", config: Optional[Dict[str, Any]] = None
) -> JavaGenerator:
    """Create a Java generator, optionally bound to a single class."""
    settings = {"java_class": java_class}
    settings.update(config or {})
    return JavaGenerator(GeneratorConfig(**settings))
