"""
Target registry for managing available binding generators.

Provides registration and instantiation of target generators by name
or alias.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import GeneratorConfig, load_config
from .core.errors import GeneratorError
from .core.generator import TargetGenerator


class RegistryError(GeneratorError):
    """Exception raised for registry-related errors."""

    pass


class TargetRegistry:
    """Registry for managing available target generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[TargetGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        target: str,
        generator_class: Type[TargetGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a target.

        Args:
            target: Primary target name (e.g., 'javascript', 'java')
            generator_class: Generator class implementing TargetGenerator
            aliases: Alternative names for this target
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If generator class is invalid or conflicts exist
        """
        if not issubclass(generator_class, TargetGenerator):
            raise RegistryError("Generator class must inherit from TargetGenerator")

        target_key = target.lower()

        if target_key in self._generators and not replace:
            return

        alias_keys = [a.lower() for a in aliases or [] if a.lower() != target_key]

        if not replace:
            for alias_key in alias_keys:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias_key}' conflicts with existing primary target"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != target_key:
                    raise RegistryError(
                        f"Alias '{alias_key}' already points to '{self._aliases[alias_key]}'"
                    )

        self._generators[target_key] = generator_class
        for alias_key in alias_keys:
            self._aliases[alias_key] = target_key

    def unregister(self, target: str):
        """Unregister a generator and its aliases."""
        target_key = target.lower()
        self._generators.pop(target_key, None)

        for alias in [a for a, t in self._aliases.items() if t == target_key]:
            del self._aliases[alias]

    def resolve(self, target: str) -> str:
        """
        Resolve a target name or alias to its primary name.

        Raises:
            RegistryError: If target not found
        """
        target_key = target.lower()
        if target_key in self._generators:
            return target_key
        if target_key in self._aliases:
            return self._aliases[target_key]

        raise RegistryError(
            f"No generator registered for target: {target}. "
            f"Available: {', '.join(self.list_targets())}"
        )

    def create_generator(
        self,
        target: str,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    ) -> TargetGenerator:
        """
        Create generator instance for a target.

        Args:
            target: Target name or alias
            config: Configuration as GeneratorConfig, dict, or file path

        Returns:
            Configured generator instance
        """
        target_key = self.resolve(target)
        generator_class = self._generators[target_key]

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(target_key, config_file=config)
        elif isinstance(config, dict):
            final_config = load_config(target_key, custom_config=config)
        elif config is None:
            final_config = load_config(target_key)
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return generator_class(final_config)

    def list_targets(self) -> List[str]:
        """Get list of registered primary target names."""
        return sorted(self._generators.keys())

    def get_aliases_for_target(self, target: str) -> List[str]:
        target_key = target.lower()
        return sorted(a for a, t in self._aliases.items() if t == target_key)

    def is_supported(self, target: str) -> bool:
        target_key = target.lower()
        return target_key in self._generators or target_key in self._aliases

    def get_target_info(self, target: str) -> Dict[str, Any]:
        """
        Get information about a registered target.

        Raises:
            RegistryError: If target not found
        """
        target_key = self.resolve(target)
        generator = self.create_generator(target_key)

        return {
            "name": generator.target_name,
            "class": type(generator).__name__,
            "description": generator.description,
            "aliases": self.get_aliases_for_target(target_key),
            "module": type(generator).__module__,
        }


# Global registry instance - created once
_global_registry: Optional[TargetRegistry] = None


def get_registry() -> TargetRegistry:
    """Get the global target registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = TargetRegistry()
        _register_builtin_targets(_global_registry)
    return _global_registry


def _register_builtin_targets(registry: TargetRegistry):
    """Register the built-in targets with their aliases."""
    from .languages.java import JavaGenerator
    from .languages.javascript import JavaScriptGenerator, TypeScriptGenerator

    registry.register("javascript", JavaScriptGenerator, aliases=["js", "emscripten"])
    registry.register("typescript", TypeScriptGenerator, aliases=["ts"])
    registry.register("java", JavaGenerator)


def get_generator(
    target: str,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> TargetGenerator:
    """Get generator instance from the global registry."""
    return get_registry().create_generator(target, config)


def list_supported_targets() -> List[str]:
    """List all supported targets from the global registry."""
    return get_registry().list_targets()


def is_target_supported(target: str) -> bool:
    return get_registry().is_supported(target)


def get_target_info(target: str) -> Dict[str, Any]:
    """Get information about a supported target."""
    return get_registry().get_target_info(target)
