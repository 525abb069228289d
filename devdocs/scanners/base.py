"""Base classes for source scanners."""

from abc import ABC, abstractmethod
from pathlib import PurePath
from typing import ClassVar, Tuple

from ..models import FileScan


class Scanner(ABC):
    """Contract for scanners that turn one file's text into definition records."""

    name: ClassVar[str]
    extensions: ClassVar[Tuple[str, ...]]

    def supports(self, path: PurePath) -> bool:
        """Return True when this scanner handles files with the given extension."""
        return path.suffix.lower() in self.extensions

    @abstractmethod
    def scan(self, text: str, source_file: str) -> FileScan:
        """Extract records from ``text``; malformed constructs are skipped, never raised."""
