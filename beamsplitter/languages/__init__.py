"""
Target-specific binding generators.

This module contains generators for the supported target ecosystems.
"""

from .java import JavaGenerator
from .javascript import JavaScriptGenerator, TypeScriptGenerator

__all__ = ["JavaGenerator", "JavaScriptGenerator", "TypeScriptGenerator"]
