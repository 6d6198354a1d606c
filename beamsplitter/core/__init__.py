"""
Core binding generation components.

Provides the type model, naming context, section dispatch, file
patching and the base class used by all target generators.
"""

from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .dispatch import Artifact, SectionDispatcher
from .errors import GeneratorError
from .generator import (
    GenerationResult,
    OutputError,
    RenderedArtifact,
    TargetGenerator,
    generate_bindings,
)
from .model import (
    Definition,
    DefinitionKind,
    EnumDefinition,
    Enumerator,
    ModelError,
    StructDefinition,
    StructField,
    TypeModel,
    load_model,
    model_from_dict,
)
from .naming import NamingContext
from .patcher import DEFAULT_MARKER, FilePatcher, MarkerMissingError, PatchError
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "TargetGenerator",
    "GeneratorError",
    "GenerationResult",
    "RenderedArtifact",
    "OutputError",
    "generate_bindings",
    # Type model
    "Definition",
    "DefinitionKind",
    "StructDefinition",
    "StructField",
    "EnumDefinition",
    "Enumerator",
    "TypeModel",
    "ModelError",
    "load_model",
    "model_from_dict",
    # Naming and dispatch
    "NamingContext",
    "Artifact",
    "SectionDispatcher",
    # Patching
    "FilePatcher",
    "PatchError",
    "MarkerMissingError",
    "DEFAULT_MARKER",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
