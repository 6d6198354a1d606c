"""
beamsplitter - binding generator for native struct and enum definitions

Generates emscripten glue, TypeScript declarations and Java classes
from one type model, patching hand-maintained files below a marker line.
"""

from .core import (
    DEFAULT_MARKER,
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    MarkerMissingError,
    NamingContext,
    TargetGenerator,
    TypeModel,
    generate_bindings,
    load_config,
    load_model,
    model_from_dict,
)
from .registry import (
    TargetRegistry,
    get_generator,
    get_target_info,
    list_supported_targets,
)

__version__ = "0.1.0"


def generate(model, target="javascript", config=None, dry_run=False):
    """
    Generate bindings for one target.

    Args:
        model: TypeModel, definitions dict, or path to a definitions JSON file
        target: Target name or alias
        config: Generator configuration dict, path, or GeneratorConfig
        dry_run: Render without writing files

    Returns:
        GenerationResult listing the artifacts
    """
    if isinstance(model, dict):
        model = model_from_dict(model)
    elif not isinstance(model, TypeModel):
        model = load_model(model)

    generator = get_generator(target, config)
    return generator.generate(model, dry_run=dry_run)


__all__ = [
    "DEFAULT_MARKER",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "MarkerMissingError",
    "NamingContext",
    "TargetGenerator",
    "TargetRegistry",
    "TypeModel",
    "generate",
    "generate_bindings",
    "get_generator",
    "get_target_info",
    "list_supported_targets",
    "load_config",
    "load_model",
    "model_from_dict",
]
