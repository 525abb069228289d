"""Pipeline orchestration for the api/css/analysis/all generation flows."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from .aggregator import Aggregator
from .classifier import categorize
from .config import DevDocsConfig
from .logging import get_logger
from .models import Corpus
from .postproc import LinkValidator, MarkdownLinter, TableOfContentsBuilder
from .renderers import (
    ANALYSIS_DATA_FILENAME,
    API_REFERENCE_FILENAME,
    CLASSES_FILENAME,
    DEFINITIONS_FILENAME,
    DOM_FILENAME,
    FUNCTIONALITY_FILENAME,
    INDEX_FILENAMES,
    SHOWCASE_FILENAME,
    THEME_GUIDE_FILENAME,
    VARIABLES_FILENAME,
    TemplateRenderer,
    render_analysis_data,
    render_api_reference,
    render_classes_reference,
    render_definitions_json,
    render_dom_reference,
    render_functionality_analysis,
    render_index,
    render_showcase,
    render_theme_guide,
    render_variables_reference,
)
from .scanners import Scanner, discover_scanners
from .source_walker import SourceWalker


class OutputWriteError(RuntimeError):
    """Raised when a generated document cannot be written; aborts the run."""


@dataclass
class RunResult:
    """Documents written by a pipeline run plus any link warnings."""

    written: List[Path] = field(default_factory=list)
    link_issues: List[str] = field(default_factory=list)

    def extend(self, other: "RunResult") -> None:
        self.written.extend(other.written)
        self.link_issues.extend(other.link_issues)


class Orchestrator:
    """Coordinates scanning, rendering and writing of every document family."""

    def __init__(
        self,
        scanners: Optional[Iterable[Scanner]] = None,
        linter: MarkdownLinter | None = None,
        toc_builder: TableOfContentsBuilder | None = None,
        link_validator: LinkValidator | None = None,
        templates: TemplateRenderer | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._scanner_overrides = list(scanners) if scanners is not None else None
        self.linter = linter or MarkdownLinter()
        self.toc_builder = toc_builder or TableOfContentsBuilder()
        self.link_validator = link_validator or LinkValidator()
        self._template_override = templates
        self._clock = clock or (lambda: datetime.now(UTC))
        self.logger = get_logger("orchestrator")

    def run_api(self, config: DevDocsConfig) -> RunResult:
        """Scan TypeScript declarations and write the API reference and JSON dump."""
        source = config.source_path("typescript")
        self.logger.info("Generating plugin API reference from %s", source)
        corpus = self._collect(config, source, only=("typescript",))
        definitions = corpus.definitions
        self.logger.info(
            "Found %d interfaces, %d types, %d enums, %d classes",
            len(definitions.interfaces),
            len(definitions.types),
            len(definitions.enums),
            len(definitions.classes),
        )

        output_dir = self._prepare_output_dir(config)
        result = RunResult()
        result.written.append(
            self._write_markdown(
                output_dir / API_REFERENCE_FILENAME,
                render_api_reference(definitions, project_name=config.project_name),
            )
        )
        result.written.append(
            self._write(output_dir / DEFINITIONS_FILENAME, render_definitions_json(definitions))
        )
        return result

    def run_styles(self, config: DevDocsConfig) -> RunResult:
        """Scan stylesheets and ClojureScript markup hints for the theming documents."""
        stylesheet_root = config.source_path("stylesheets")
        markup_root = config.source_path("clojurescript")
        self.logger.info("Generating CSS and DOM references from %s", stylesheet_root)
        styles = self._collect(config, stylesheet_root, only=("stylesheet",)).styles
        dom = self._collect(config, markup_root, only=("clojurescript",)).dom
        self.logger.info(
            "Found %d classes, %d variables, %d components",
            len(styles.class_names),
            len(styles.custom_properties),
            len(styles.component_class_names),
        )

        output_dir = self._prepare_output_dir(config)
        project_name = config.project_name
        documents = (
            (VARIABLES_FILENAME, render_variables_reference(styles)),
            (CLASSES_FILENAME, render_classes_reference(styles, project_name=project_name)),
            (DOM_FILENAME, render_dom_reference(dom, project_name=project_name)),
            (
                THEME_GUIDE_FILENAME,
                render_theme_guide(styles, project_name=project_name, templates=self._templates(config)),
            ),
        )
        result = RunResult()
        for filename, content in documents:
            result.written.append(self._write_markdown(output_dir / filename, content))
        return result

    def run_analysis(self, config: DevDocsConfig) -> RunResult:
        """Analyse ClojureScript function definitions under the API source root."""
        source = config.source_path("api")
        self.logger.info("Analyzing application API in %s", source)
        functions = self._collect(config, source, only=("clojurescript",)).functions
        buckets = categorize(functions.records)
        self.logger.info(
            "Analyzed %d functions (%d exported)", len(functions.records), functions.exported_count
        )

        output = config.output
        output_dir = self._prepare_output_dir(config)
        result = RunResult()
        result.written.append(
            self._write_markdown(
                output_dir / FUNCTIONALITY_FILENAME,
                render_functionality_analysis(
                    functions,
                    buckets,
                    project_name=config.project_name,
                    key_function_limit=output.key_function_limit,
                    namespace_limit=output.namespace_limit,
                ),
            )
        )
        result.written.append(
            self._write_markdown(
                output_dir / SHOWCASE_FILENAME,
                render_showcase(
                    buckets,
                    project_name=config.project_name,
                    example_limit=output.showcase_example_limit,
                    templates=self._templates(config),
                ),
            )
        )
        result.written.append(
            self._write(
                output_dir / ANALYSIS_DATA_FILENAME,
                render_analysis_data(functions, buckets, generated_at=self._timestamp(config)),
            )
        )
        return result

    def run_all(self, config: DevDocsConfig) -> RunResult:
        """Run every generator, then write and link-check the index pages."""
        result = RunResult()
        result.extend(self.run_api(config))
        result.extend(self.run_styles(config))
        result.extend(self.run_analysis(config))

        output_dir = self._prepare_output_dir(config)
        generated_at = self._timestamp(config)
        templates = self._templates(config)
        index_paths = [
            self._write_markdown(
                output_dir / filename,
                render_index(
                    project_name=config.project_name,
                    generated_at=generated_at,
                    language=language,
                    templates=templates,
                ),
            )
            for language, filename in INDEX_FILENAMES.items()
        ]
        result.written.extend(index_paths)
        # The two index pages link to each other, so both must exist first.
        for path in index_paths:
            result.link_issues.extend(self._check_links(path))

        self.logger.info("Generated %d documents in %s", len(result.written), output_dir)
        return result

    def _collect(self, config: DevDocsConfig, root: Path, *, only: Sequence[str]) -> Corpus:
        aggregator = Aggregator(
            scanners=self._select_scanners(config),
            walker=SourceWalker(config.exclude_paths, project_root=config.root),
        )
        return aggregator.collect(root, only=only)

    def _templates(self, config: DevDocsConfig) -> TemplateRenderer:
        if self._template_override is not None:
            return self._template_override
        return TemplateRenderer(config.templates_dir)

    def _select_scanners(self, config: DevDocsConfig) -> List[Scanner]:
        if self._scanner_overrides is not None:
            return list(self._scanner_overrides)
        return discover_scanners(config.scanners.enabled)

    def _timestamp(self, config: DevDocsConfig) -> Optional[str]:
        if not config.output.timestamps:
            return None
        return self._clock().isoformat()

    def _prepare_output_dir(self, config: DevDocsConfig) -> Path:
        output_dir = config.output_dir
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputWriteError(f"Unable to create output directory {output_dir}: {exc}") from exc
        return output_dir

    def _write_markdown(self, path: Path, markdown: str) -> Path:
        return self._write(path, self.linter.lint(self.toc_builder.build(markdown)))

    def _write(self, path: Path, content: str) -> Path:
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(f"Unable to write {path}: {exc}") from exc
        self.logger.info("Wrote %s", path)
        return path

    def _check_links(self, path: Path) -> List[str]:
        issues = self.link_validator.validate(path.read_text(encoding="utf-8"), root=path.parent)
        for issue in issues:
            self.logger.warning("%s: %s", path.name, issue)
        return issues


__all__ = ["OutputWriteError", "Orchestrator", "RunResult"]
