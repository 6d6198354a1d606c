"""
Java binding generator.

Patches static nested classes and enums into hand-maintained Java classes.
"""

from .generator import JavaGenerator, create_java_generator
from .naming import JavaNaming

__all__ = ["JavaGenerator", "JavaNaming", "create_java_generator"]
