"""English and Japanese landing pages linking every generated document."""

from __future__ import annotations

from typing import Dict, Optional

from .analysis import ANALYSIS_DATA_FILENAME, FUNCTIONALITY_FILENAME, SHOWCASE_FILENAME
from .api_reference import API_REFERENCE_FILENAME, DEFINITIONS_FILENAME
from .styles import CLASSES_FILENAME, DOM_FILENAME, THEME_GUIDE_FILENAME, VARIABLES_FILENAME
from .templating import TemplateRenderer

INDEX_FILENAMES: Dict[str, str] = {"en": "README.md", "ja": "README.ja.md"}

_TEMPLATES = {"en": "index.md.j2", "ja": "index.ja.md.j2"}

DOCUMENT_FILES: Dict[str, str] = {
    "api_reference": API_REFERENCE_FILENAME,
    "definitions": DEFINITIONS_FILENAME,
    "functionality": FUNCTIONALITY_FILENAME,
    "showcase": SHOWCASE_FILENAME,
    "analysis_data": ANALYSIS_DATA_FILENAME,
    "variables": VARIABLES_FILENAME,
    "classes": CLASSES_FILENAME,
    "dom": DOM_FILENAME,
    "theme_guide": THEME_GUIDE_FILENAME,
}


def render_index(
    *,
    project_name: str = "Logseq",
    generated_at: Optional[str] = None,
    language: str = "en",
    templates: TemplateRenderer | None = None,
) -> str:
    if language not in _TEMPLATES:
        raise ValueError(f"Unsupported index language: {language}")
    renderer = templates or TemplateRenderer()
    return renderer.render(
        _TEMPLATES[language],
        project_name=project_name,
        generated_at=generated_at,
        files=DOCUMENT_FILES,
    )


__all__ = ["DOCUMENT_FILES", "INDEX_FILENAMES", "render_index"]
