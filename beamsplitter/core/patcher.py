"""
In-place patching of hand-maintained output files.

Everything above the marker line is kept byte for byte; the marker line
and everything after it are replaced by freshly generated content.
"""

from enum import Enum
from pathlib import Path
from typing import Callable, List, Union

from ..logging_config import get_logger
from .errors import GeneratorError

logger = get_logger(__name__)

DEFAULT_MARKER = "The remainder of this file is generated by beamsplitter"


class PatchError(GeneratorError):
    """Exception raised when a file cannot be prepared for patching."""

    pass


class MarkerMissingError(PatchError):
    """Exception raised when a patched file has no marker line."""

    pass


class PatchState(Enum):
    """Phases of a patch run."""

    SCANNING = "scanning"
    GENERATING = "generating"
    DONE = "done"
    MARKER_MISSING = "marker_missing"


class FilePatcher:
    """Splits an existing file at its marker line and rebuilds it."""

    def __init__(self, marker: str = DEFAULT_MARKER, encoding: str = "utf-8"):
        if not marker:
            raise PatchError("Marker text must not be empty")
        self.marker = marker
        self.encoding = encoding
        self.state = PatchState.SCANNING

    def scan(self, path: Union[str, Path]) -> bytes:
        """
        Read the preserved prefix of a file.

        Args:
            path: Existing file containing a marker line

        Returns:
            Every byte before the first marker line, line endings included

        Raises:
            PatchError: If the file cannot be read
            MarkerMissingError: If no line contains the marker
        """
        path = Path(path)
        self.state = PatchState.SCANNING
        marker = self.marker.encode(self.encoding)
        preserved: List[bytes] = []

        try:
            with open(path, "rb") as f:
                for line in f:
                    if marker in line:
                        logger.debug(
                            "Found marker in %s after %d lines", path, len(preserved)
                        )
                        self.state = PatchState.GENERATING
                        return b"".join(preserved)
                    preserved.append(line)
        except FileNotFoundError as e:
            raise PatchError(f"File to edit does not exist: {path}") from e
        except OSError as e:
            raise PatchError(f"Unable to read {path}: {e}") from e

        self.state = PatchState.MARKER_MISSING
        raise MarkerMissingError(f"Unable to find marker line in {path}")

    def compose(
        self, prefix: bytes, marker_comment: str, body: str, closing: str = ""
    ) -> bytes:
        """
        Assemble the new file contents after a successful scan.

        Args:
            prefix: Preserved bytes returned by scan()
            marker_comment: Comment template containing "{marker}"
            body: Rendered sections
            closing: Fixed boilerplate that ends the file

        Returns:
            Complete file contents
        """
        marker_line = marker_comment.format(marker=self.marker) + "\n"
        generated = marker_line + body + closing
        self.state = PatchState.DONE
        return prefix + generated.encode(self.encoding)

    def patch(
        self,
        path: Union[str, Path],
        marker_comment: str,
        render_body: Callable[[], str],
        closing: str = "",
    ) -> bytes:
        """
        Scan a file and build its patched contents without writing them.

        The body is only rendered once the marker has been found.
        """
        prefix = self.scan(path)
        return self.compose(prefix, marker_comment, render_body(), closing)
