"""
JavaScript and TypeScript naming rules.

Emscripten bindings are flat, so "$" stands in for the native scoping
delimiter. Enum values still use "." between the enum type and the
value because emscripten has first-class support for class enums.
"""

from typing import Callable, Dict

from ...core.naming import (
    MEMBER_ACCESS_CHAR,
    SCRIPT_SCOPE_CHAR,
    NamingContext,
    count_scopes,
    flatten,
)
from ...core.model import SCOPE_DELIMITER

# Members of the native math namespace have the same name on the scripting side
MATH_NAMESPACE_PREFIX = "math" + SCOPE_DELIMITER

TS_SCALAR_TYPES = {
    "float": "number",
    "double": "number",
    "int": "number",
    "int8_t": "number",
    "int16_t": "number",
    "int32_t": "number",
    "uint8_t": "number",
    "uint16_t": "number",
    "uint32_t": "number",
    "bool": "boolean",
    "LinearColorA": "float4",
    "LinearColor": "float3",
}


class JavaScriptNaming:
    """Translates native qualified names into JavaScript/TypeScript spellings."""

    def __init__(self, context: NamingContext):
        self.context = context

    def qualified_type_name(self, name: str) -> str:
        """Flatten a qualified type name for the global symbol table."""
        return flatten(name, SCRIPT_SCOPE_CHAR)

    def qualified_value_name(self, name: str) -> str:
        """
        Spell an enumerator (or any default literal) as a scripting expression.

        Qualified values resolve from the root object: nested scopes are
        flattened with "$" and the final delimiter becomes member access.
        Unqualified input is returned unchanged, which lets templates pass
        plain literals such as "0.5" or "true" through the same filter.

        Args:
            name: Native value, e.g. "View::QualityLevel::LOW"

        Returns:
            Scripting expression, e.g. "Filament.View$QualityLevel.LOW"
        """
        count = count_scopes(name)
        if count == 0:
            return name

        name = f"{self.context.root_identifier}.{self.context.script_prefix}{name}"
        name = name.replace(SCOPE_DELIMITER, SCRIPT_SCOPE_CHAR, count - 1)
        return name.replace(SCOPE_DELIMITER, MEMBER_ACCESS_CHAR, 1)

    def scalar_type_name(self, native_type: str) -> str:
        """Map a native field type to its TypeScript declaration type."""
        if native_type.startswith(MATH_NAMESPACE_PREFIX):
            return native_type[len(MATH_NAMESPACE_PREFIX):]
        if native_type in TS_SCALAR_TYPES:
            return TS_SCALAR_TYPES[native_type]
        return self.context.script_prefix + self.qualified_type_name(native_type)

    def filters(self) -> Dict[str, Callable[[str], str]]:
        """Template filters for the JavaScript and TypeScript sections."""
        return {
            "qualifiedtype": self.qualified_type_name,
            "qualifiedvalue": self.qualified_value_name,
            "tstype": self.scalar_type_name,
        }

    def globals(self) -> Dict[str, str]:
        """Template globals carrying the derived prefixes."""
        return {
            "jsprefix": self.context.script_prefix,
            "cprefix": self.context.native_prefix,
            "classprefix": self.context.class_prefix,
            "root": self.context.root_identifier,
        }
