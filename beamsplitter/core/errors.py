"""
Base exception for binding generation.

Every failure during a run (bad model, missing marker, rendering,
file output) derives from GeneratorError so callers can abort the
whole run on any of them.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass
