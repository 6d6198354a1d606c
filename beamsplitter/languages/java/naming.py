"""
Java naming rules.

Definitions become static nested classes and enums of one enclosing
Java class, so qualified names are spelled relative to that class
with "." between nested types.
"""

import re
from typing import Dict, Optional

from ...core.model import SCOPE_DELIMITER
from ...core.naming import MEMBER_ACCESS_CHAR, count_scopes, flatten, strip_scope

MATH_NAMESPACE_PREFIX = "math" + SCOPE_DELIMITER

JAVA_SCALAR_TYPES = {
    "float": "float",
    "double": "double",
    "bool": "boolean",
    "int": "int",
    "int8_t": "int",
    "int16_t": "int",
    "int32_t": "int",
    "uint8_t": "int",
    "uint16_t": "int",
    "uint32_t": "int",
    "int64_t": "long",
    "uint64_t": "long",
    "size_t": "long",
    "LinearColor": "float[]",
    "LinearColorA": "float[]",
}

_FLOAT_LITERAL = re.compile(r"^[-+]?(\d+\.\d*|\.\d+|\d+)([eE][-+]?\d+)?$")


class JavaNaming:
    """
    Translates native names, types and literals into Java spellings.

    One instance serves one enclosing Java class.

    Args:
        scope: Native scope the class stands for, stripped from unknown names
        names: Java path inside the class of every definition it holds,
            keyed by qualified native name (e.g. "View::Bloom::Mode" -> "Bloom.Mode")
    """

    def __init__(self, scope: str = "", names: Optional[Dict[str, str]] = None):
        self.scope = scope
        self.names = dict(names or {})

    def resolve(self, name: str, owner: str = "") -> Optional[str]:
        """
        Find the Java path of a type name referenced from inside ``owner``.

        The owner's enclosing scopes are searched innermost first, then the
        name is tried as fully qualified.

        Returns:
            Java path, or None if the name is not a definition of this class
        """
        segments = owner.split(SCOPE_DELIMITER) if owner else []
        for depth in range(len(segments), 0, -1):
            candidate = SCOPE_DELIMITER.join(segments[:depth] + [name])
            if candidate in self.names:
                return self.names[candidate]
        return self.names.get(name)

    def type_name(self, native_type: str, owner: str = "") -> str:
        """
        Map a native field type to a Java type.

        Args:
            native_type: Native type, e.g. "View::QualityLevel" or "math::float3"
            owner: Qualified name of the definition holding the field

        Returns:
            Java type, e.g. "QualityLevel" or "float[]"
        """
        if native_type.startswith(MATH_NAMESPACE_PREFIX):
            return "float[]"
        if native_type in JAVA_SCALAR_TYPES:
            return JAVA_SCALAR_TYPES[native_type]
        resolved = self.resolve(native_type, owner)
        if resolved is not None:
            return resolved
        return flatten(strip_scope(native_type, self.scope), MEMBER_ACCESS_CHAR)

    def value(self, literal: str, native_type: str = "", owner: str = "") -> str:
        """
        Spell a normalized default literal as a Java expression.

        Qualified enum values are written relative to the enclosing class,
        float literals get an "f" suffix, vector literals become float array
        initializers and an empty initializer of a class type becomes a
        constructor call.

        Raises:
            ValueError: For a non-empty initializer of a type that is not an array
        """
        literal = literal.strip()
        if literal[:1] in ("{", "["):
            return self._initializer(literal, native_type, owner)
        if count_scopes(literal) > 0:
            enum_name, _, item = literal.rpartition(SCOPE_DELIMITER)
            return self.type_name(enum_name, owner) + MEMBER_ACCESS_CHAR + item
        if native_type == "float" and _FLOAT_LITERAL.match(literal):
            return literal + "f"
        return literal

    def _initializer(self, literal: str, native_type: str, owner: str) -> str:
        java_type = self.type_name(native_type, owner)
        inner = literal[1:-1].strip()
        if java_type.endswith("[]"):
            return f"new {java_type} {{{inner}}}"
        if java_type and not inner:
            return f"new {java_type}()"
        raise ValueError(f"Cannot spell initializer {literal} for Java type {java_type!r}")
