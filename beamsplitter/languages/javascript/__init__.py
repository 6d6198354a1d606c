"""
JavaScript and TypeScript binding generators.

Emits emscripten glue and a JavaScript extension script, and patches
ambient declarations into a TypeScript declaration file.
"""

from .generator import (
    JavaScriptGenerator,
    TypeScriptGenerator,
    create_javascript_generator,
    create_typescript_generator,
)
from .naming import JavaScriptNaming

__all__ = [
    "JavaScriptGenerator",
    "TypeScriptGenerator",
    "JavaScriptNaming",
    "create_javascript_generator",
    "create_typescript_generator",
]
