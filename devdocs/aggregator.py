"""Corpus aggregation across a source tree."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .logging import get_logger
from .models import Corpus, FileScan
from .scanners import Scanner, discover_scanners
from .source_walker import SourceFile, SourceWalker


class SourceReadError(RuntimeError):
    """Raised when a source file cannot be read; aborts the whole run."""


class Aggregator:
    """Routes files to scanners by extension and merges their results.

    Each call to :meth:`collect` builds and returns a fresh :class:`Corpus`;
    the aggregator itself holds no per-run state.
    """

    def __init__(
        self,
        scanners: Optional[Iterable[Scanner]] = None,
        walker: SourceWalker | None = None,
    ) -> None:
        self.scanners: List[Scanner] = list(scanners) if scanners is not None else discover_scanners()
        self.walker = walker or SourceWalker()
        self.logger = get_logger("aggregator")

    def collect(self, root: Path | str, *, only: Sequence[str] | None = None) -> Corpus:
        """Scan every supported file under ``root``.

        ``only`` restricts the run to the named scanners; names that are not
        configured are ignored.
        """
        root_path = Path(root).expanduser().resolve()
        active = [scanner for scanner in self.scanners if only is None or scanner.name in only]
        corpus = Corpus(root=str(root_path))
        if not active:
            self.logger.debug("No scanners selected for %s", root_path)
            return corpus

        extensions = sorted({ext for scanner in active for ext in scanner.extensions})
        self.logger.debug("Scanning %s for %s", root_path, ", ".join(extensions))

        for source in self.walker.walk(root_path, extensions):
            handlers = [scanner for scanner in active if scanner.supports(source.path)]
            if not handlers:
                continue
            text = _read_source(source)
            corpus.files.append(source.relative)
            for scanner in handlers:
                result = scanner.scan(text, source.relative)
                self._merge(corpus, result)
                self._log_file(scanner, result)

        self.logger.debug("Aggregated %d file(s) under %s", len(corpus.files), root_path)
        return corpus

    @staticmethod
    def _merge(corpus: Corpus, result: FileScan) -> None:
        corpus.definitions.merge(result.definitions)
        if result.style is not None:
            corpus.styles.merge(result.style)
        if result.dom is not None:
            corpus.dom.merge(result.dom)
        if result.functions is not None:
            corpus.functions.merge(result.functions)

    def _log_file(self, scanner: Scanner, result: FileScan) -> None:
        parts: List[str] = []
        if result.definitions:
            parts.append(f"{len(result.definitions)} definitions")
        if result.style is not None:
            parts.append(
                f"{len(result.style.class_names)} classes, {len(result.style.custom_properties)} variables"
            )
        if result.functions is not None and (result.functions.exported or result.functions.internal):
            parts.append(
                f"{len(result.functions.exported)} exported, {len(result.functions.internal)} internal functions"
            )
        if parts:
            self.logger.debug("Processed %s (%s): %s", result.source_file, scanner.name, "; ".join(parts))


def _read_source(source: SourceFile) -> str:
    try:
        return source.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Unable to read {source.path}: {exc}") from exc


__all__ = ["Aggregator", "SourceReadError"]
