"""
Naming utilities shared by all binding targets.

Handles the per-run namespace prefixes and the scope-delimiter
rewriting every target needs to spell native qualified names.
"""

from dataclasses import dataclass, field

from .model import SCOPE_DELIMITER

DEFAULT_ROOT_IDENTIFIER = "Filament"

# Flat scoping character used where the scripting side has a single global symbol table
SCRIPT_SCOPE_CHAR = "$"
MEMBER_ACCESS_CHAR = "."


def count_scopes(name: str) -> int:
    """Number of scoping delimiters in a qualified name."""
    return name.count(SCOPE_DELIMITER)


def flatten(name: str, replacement: str) -> str:
    """Replace every scoping delimiter in a qualified name."""
    return name.replace(SCOPE_DELIMITER, replacement)


def strip_scope(name: str, scope: str) -> str:
    """Drop a leading scope (and its delimiter) from a qualified name."""
    if not scope:
        return name
    prefix = scope + SCOPE_DELIMITER
    if name.startswith(prefix):
        return name[len(prefix):]
    return name


@dataclass(frozen=True)
class NamingContext:
    """
    Per-target naming configuration for one generation run.

    The derived prefixes are computed once from the namespace and reused
    for every definition rendered during the run.
    """

    namespace: str = ""
    root_identifier: str = DEFAULT_ROOT_IDENTIFIER

    script_prefix: str = field(default="", init=False)  # e.g. "View$"
    class_prefix: str = field(default="", init=False)  # e.g. "View.prototype."
    native_prefix: str = field(default="", init=False)  # e.g. "View::"

    def __post_init__(self):
        """Derive the scripting, class and native prefixes."""
        if self.namespace:
            object.__setattr__(self, "script_prefix", self.namespace + SCRIPT_SCOPE_CHAR)
            object.__setattr__(self, "class_prefix", self.namespace + ".prototype.")
            object.__setattr__(self, "native_prefix", self.namespace + SCOPE_DELIMITER)

    @property
    def has_namespace(self) -> bool:
        return bool(self.namespace)
