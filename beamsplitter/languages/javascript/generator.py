"""
JavaScript and TypeScript binding generators.

The JavaScript target regenerates the emscripten glue sources and the
extension script from scratch. The TypeScript target edits the
declaration file below its marker line.
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ...core.config import GeneratorConfig
from ...core.dispatch import Artifact
from ...core.generator import TargetGenerator
from ...core.model import Definition, DefinitionKind, TypeModel
from .naming import JavaScriptNaming

BINDINGS_FILE = "jsbindings_generated.cpp"
ENUMS_FILE = "jsenums_generated.cpp"
EXTENSIONS_FILE = "extensions_generated.js"


class _ScriptingGenerator(TargetGenerator):
    """Shared naming and templates for the JavaScript-side targets."""

    def get_template_directory(self) -> Optional[Path]:
        """Return the JavaScript templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def naming(self) -> JavaScriptNaming:
        return JavaScriptNaming(self.naming_context)

    def template_filters(self) -> Dict[str, Callable]:
        return self.naming.filters()

    def template_globals(self) -> Dict[str, Any]:
        template_globals = self.naming.globals()
        template_globals["includes"] = list(self.config.includes)
        template_globals["native_namespace"] = self.config.native_namespace
        return template_globals


class JavaScriptGenerator(_ScriptingGenerator):
    """Emits emscripten bindings and the JavaScript extension script."""

    @property
    def target_name(self) -> str:
        return "javascript"

    @property
    def description(self) -> str:
        return "Emscripten value_object/enum_ bindings and JS defaults helpers"

    def artifacts(self, model: TypeModel) -> List[Tuple[Artifact, Sequence[Definition]]]:
        definitions = list(model)
        return [
            (
                Artifact(
                    filename=BINDINGS_FILE,
                    header="js_bindings_header.cpp.j2",
                    sections={DefinitionKind.STRUCT: "js_bindings_struct.cpp.j2"},
                    footer="js_bindings_footer.cpp.j2",
                ),
                definitions,
            ),
            (
                Artifact(
                    filename=ENUMS_FILE,
                    header="js_enums_header.cpp.j2",
                    sections={DefinitionKind.ENUM: "js_enum.cpp.j2"},
                    footer="js_enums_footer.cpp.j2",
                ),
                definitions,
            ),
            (
                Artifact(
                    filename=EXTENSIONS_FILE,
                    header="js_extensions_header.js.j2",
                    sections={DefinitionKind.STRUCT: "js_extension.js.j2"},
                    footer="js_extensions_footer.js.j2",
                ),
                definitions,
            ),
        ]


class TypeScriptGenerator(_ScriptingGenerator):
    """Edits the TypeScript declaration file in place."""

    @property
    def target_name(self) -> str:
        return "typescript"

    @property
    def description(self) -> str:
        return "Ambient interfaces and enums patched into a .d.ts file"

    def artifacts(self, model: TypeModel) -> List[Tuple[Artifact, Sequence[Definition]]]:
        return [
            (
                Artifact(
                    filename=self.config.declaration_file,
                    sections={
                        DefinitionKind.STRUCT: "ts_struct.d.ts.j2",
                        DefinitionKind.ENUM: "ts_enum.d.ts.j2",
                    },
                    marker_comment="// {marker}",
                ),
                list(model),
            )
        ]


def create_javascript_generator(
    namespace: str = "", config: Optional[Dict[str, Any]] = None
) -> JavaScriptGenerator:
    """Create a JavaScript generator for a namespace."""
    settings = {"namespace": namespace, "native_namespace": "filament"}
    settings.update(config or {})
    return JavaScriptGenerator(GeneratorConfig(**settings))


def create_typescript_generator(
    namespace: str = "", config: Optional[Dict[str, Any]] = None
) -> TypeScriptGenerator:
    """Create a TypeScript generator for a namespace."""
    settings = {"namespace": namespace}
    settings.update(config or {})
    return TypeScriptGenerator(GeneratorConfig(**settings))
