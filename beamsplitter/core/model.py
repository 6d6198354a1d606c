"""
Type model for binding generation.

Reads the definitions document written by the header extractor into a
normalized, read-only representation that every target generator
works from.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .errors import GeneratorError

SCOPE_DELIMITER = "::"


class ModelError(GeneratorError):
    """Exception raised for malformed type model documents."""

    pass


class DefinitionKind(Enum):
    """Kinds of type definitions that can be bound into a target."""

    STRUCT = "struct"
    ENUM = "enum"


@dataclass(frozen=True)
class StructField:
    """A single field of a struct definition."""

    name: str
    type: str  # Native type, possibly qualified (e.g. "View::QualityLevel")
    default: Optional[str] = None  # Literal already normalized by the extractor
    doc: str = ""


@dataclass(frozen=True)
class Enumerator:
    """A named value of an enum definition."""

    name: str
    value: int
    doc: str = ""


@dataclass(frozen=True)
class Definition:
    """Base for every bindable type definition."""

    name: str
    doc: str = ""

    @property
    def kind(self) -> DefinitionKind:
        raise NotImplementedError

    @property
    def segments(self) -> Tuple[str, ...]:
        """Qualified name split on the scoping delimiter."""
        return tuple(self.name.split(SCOPE_DELIMITER))

    @property
    def leaf_name(self) -> str:
        """Last segment of the qualified name."""
        return self.segments[-1]

    @property
    def parent_name(self) -> Optional[str]:
        """Qualified name of the enclosing scope, or None at top level."""
        segments = self.segments
        if len(segments) < 2:
            return None
        return SCOPE_DELIMITER.join(segments[:-1])


@dataclass(frozen=True)
class StructDefinition(Definition):
    """A record type with ordered fields."""

    fields: Tuple[StructField, ...] = ()

    @property
    def kind(self) -> DefinitionKind:
        return DefinitionKind.STRUCT


@dataclass(frozen=True)
class EnumDefinition(Definition):
    """An enumeration with ordered enumerators."""

    enumerators: Tuple[Enumerator, ...] = ()

    @property
    def kind(self) -> DefinitionKind:
        return DefinitionKind.ENUM

    @property
    def is_sequential(self) -> bool:
        """True when values run 0, 1, 2, ... in declaration order."""
        return all(item.value == index for index, item in enumerate(self.enumerators))


@dataclass(frozen=True)
class TypeModel:
    """Ordered, read-only collection of definitions."""

    definitions: Tuple[Definition, ...] = ()
    _index: Dict[str, Definition] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        index = {}
        for definition in self.definitions:
            _check_name(definition.name)
            if definition.name in index:
                raise ModelError(f"Duplicate definition name: {definition.name}")
            index[definition.name] = definition
        object.__setattr__(self, "_index", index)

    def __iter__(self) -> Iterator[Definition]:
        return iter(self.definitions)

    def __len__(self) -> int:
        return len(self.definitions)

    def get(self, name: str) -> Optional[Definition]:
        """Get a definition by qualified name."""
        return self._index.get(name)

    def structs(self) -> List[StructDefinition]:
        return [d for d in self.definitions if d.kind == DefinitionKind.STRUCT]

    def enums(self) -> List[EnumDefinition]:
        return [d for d in self.definitions if d.kind == DefinitionKind.ENUM]

    def children_of(self, definition: Definition) -> List[Definition]:
        """Definitions declared directly inside the given struct, in model order."""
        return [d for d in self.definitions if d.parent_name == definition.name]

    def is_nested(self, definition: Definition) -> bool:
        """True when the enclosing scope is a struct that is itself in the model."""
        parent = self.get(definition.parent_name) if definition.parent_name else None
        return parent is not None and parent.kind == DefinitionKind.STRUCT

    def scopes(self) -> List[str]:
        """Distinct outermost segments of qualified names, in model order."""
        seen = []
        for definition in self.definitions:
            segments = definition.segments
            if len(segments) > 1 and segments[0] not in seen:
                seen.append(segments[0])
        return seen

    def in_scope(self, scope: str) -> "TypeModel":
        """Sub-model of the definitions declared under the given outermost scope."""
        prefix = scope + SCOPE_DELIMITER
        return TypeModel(
            tuple(d for d in self.definitions if d.name.startswith(prefix))
        )


def _check_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        raise ModelError(f"Definition name must be a non-empty string: {name!r}")
    if any(not segment for segment in name.split(SCOPE_DELIMITER)):
        raise ModelError(f"Empty scope segment in qualified name: {name}")


def _entries(decl: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """The list of member objects stored under ``key`` in a declaration."""
    entries = decl.get(key, [])
    if not isinstance(entries, list):
        raise ModelError(f"'{key}' of {decl['name']} must be a list")
    for entry in entries:
        if not isinstance(entry, dict):
            raise ModelError(f"Entry in '{key}' of {decl['name']} must be an object: {entry!r}")
    return entries


def _parse_struct(decl: Dict[str, Any]) -> StructDefinition:
    fields = []
    for item in _entries(decl, "fields"):
        if "name" not in item or "type" not in item:
            raise ModelError(f"Field in {decl['name']} needs both 'name' and 'type'")
        default = item.get("default")
        fields.append(
            StructField(
                name=item["name"],
                type=item["type"],
                default=None if default is None else str(default),
                doc=item.get("doc", ""),
            )
        )
    return StructDefinition(
        name=decl["name"], doc=decl.get("doc", ""), fields=tuple(fields)
    )


def _parse_enum(decl: Dict[str, Any]) -> EnumDefinition:
    enumerators = []
    next_value = 0
    for item in _entries(decl, "enumerators"):
        if "name" not in item:
            raise ModelError(f"Enumerator in {decl['name']} has no name")
        value = item.get("value", next_value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ModelError(
                f"Enumerator {decl['name']}::{item['name']} has non-integer value {value!r}"
            )
        enumerators.append(
            Enumerator(name=item["name"], value=value, doc=item.get("doc", ""))
        )
        next_value = value + 1
    return EnumDefinition(
        name=decl["name"], doc=decl.get("doc", ""), enumerators=tuple(enumerators)
    )


_PARSERS = {
    DefinitionKind.STRUCT: _parse_struct,
    DefinitionKind.ENUM: _parse_enum,
}


def model_from_dict(data: Dict[str, Any]) -> TypeModel:
    """
    Build a type model from a parsed definitions document.

    Args:
        data: Dictionary with a "definitions" list

    Returns:
        TypeModel preserving document order

    Raises:
        ModelError: If the document is malformed
    """
    if not isinstance(data, dict) or not isinstance(data.get("definitions"), list):
        raise ModelError("Type model document must contain a 'definitions' list")

    definitions = []
    for decl in data["definitions"]:
        if not isinstance(decl, dict) or "name" not in decl:
            raise ModelError(f"Definition without a name: {decl!r}")
        try:
            kind = DefinitionKind(decl.get("kind"))
        except ValueError:
            raise ModelError(
                f"Unsupported definition kind {decl.get('kind')!r} for {decl['name']}"
            )
        definitions.append(_PARSERS[kind](decl))

    return TypeModel(tuple(definitions))


def load_model(path: Union[str, Path]) -> TypeModel:
    """Load a type model from a JSON file."""
    path = Path(path)
    if not path.exists():
        raise ModelError(f"Type model file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ModelError(f"Invalid JSON in type model file {path}: {str(e)}")
    except (OSError, UnicodeDecodeError) as e:
        raise ModelError(f"Unable to read type model file {path}: {str(e)}")

    return model_from_dict(data)
