"""Document renderers for the definitions, styles and function corpora."""

from .analysis import (
    ANALYSIS_DATA_FILENAME,
    FUNCTIONALITY_FILENAME,
    SHOWCASE_FILENAME,
    render_analysis_data,
    render_functionality_analysis,
    render_showcase,
)
from .api_reference import (
    API_REFERENCE_FILENAME,
    DEFINITIONS_FILENAME,
    render_api_reference,
    render_definitions_json,
)
from .index import INDEX_FILENAMES, render_index
from .styles import (
    CLASSES_FILENAME,
    DOM_FILENAME,
    THEME_GUIDE_FILENAME,
    VARIABLES_FILENAME,
    render_classes_reference,
    render_dom_reference,
    render_theme_guide,
    render_variables_reference,
)
from .templating import TemplateRenderer

__all__ = [
    "ANALYSIS_DATA_FILENAME",
    "API_REFERENCE_FILENAME",
    "CLASSES_FILENAME",
    "DEFINITIONS_FILENAME",
    "DOM_FILENAME",
    "FUNCTIONALITY_FILENAME",
    "INDEX_FILENAMES",
    "SHOWCASE_FILENAME",
    "THEME_GUIDE_FILENAME",
    "TemplateRenderer",
    "VARIABLES_FILENAME",
    "render_analysis_data",
    "render_api_reference",
    "render_classes_reference",
    "render_definitions_json",
    "render_dom_reference",
    "render_functionality_analysis",
    "render_index",
    "render_showcase",
    "render_theme_guide",
    "render_variables_reference",
]
