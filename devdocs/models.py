"""Core data models shared across devdocs components."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional


class DefinitionKind(str, Enum):
    """Kinds of TypeScript declarations recorded by the definition scanner."""

    INTERFACE = "interface"
    TYPE = "type"
    ENUM = "enum"
    CLASS = "class"


class MemberKind(str, Enum):
    PROPERTY = "property"
    METHOD = "method"


@dataclass(frozen=True)
class RawDefinition:
    """An extracted declaration whose body has not been parsed."""

    kind: DefinitionKind
    name: str
    body: str
    source_file: str
    full_definition: str = ""

    @property
    def identity(self) -> tuple[DefinitionKind, str]:
        return (self.kind, self.name)


@dataclass(frozen=True)
class MemberDefinition:
    """A property or method parsed from an interface body."""

    kind: MemberKind
    name: str
    type: str
    parameters: Optional[str] = None
    generics: Optional[str] = None
    optional: bool = False


@dataclass
class DefinitionCorpus:
    """Interfaces, type aliases, enums and classes gathered across a tree."""

    interfaces: List[RawDefinition] = field(default_factory=list)
    types: List[RawDefinition] = field(default_factory=list)
    enums: List[RawDefinition] = field(default_factory=list)
    classes: List[RawDefinition] = field(default_factory=list)

    def bucket(self, kind: DefinitionKind) -> List[RawDefinition]:
        return {
            DefinitionKind.INTERFACE: self.interfaces,
            DefinitionKind.TYPE: self.types,
            DefinitionKind.ENUM: self.enums,
            DefinitionKind.CLASS: self.classes,
        }[kind]

    def add(self, definition: RawDefinition) -> bool:
        """Append unless a definition with the same identity was already seen."""
        target = self.bucket(definition.kind)
        if any(existing.name == definition.name for existing in target):
            return False
        target.append(definition)
        return True

    def merge(self, definitions: Iterable[RawDefinition]) -> None:
        for definition in definitions:
            self.add(definition)


@dataclass(frozen=True)
class CustomProperty:
    """A CSS custom property declaration with its literal value."""

    name: str
    value: str
    source_file: str


@dataclass
class StyleDefinition:
    """Classes and custom properties found in one stylesheet."""

    source_file: str
    class_names: List[str] = field(default_factory=list)
    custom_properties: List[CustomProperty] = field(default_factory=list)
    component_class_names: List[str] = field(default_factory=list)


@dataclass
class StyleCorpus:
    """Stylesheet facts merged across every processed file."""

    class_names: List[str] = field(default_factory=list)
    custom_properties: List[CustomProperty] = field(default_factory=list)
    component_class_names: List[str] = field(default_factory=list)

    def merge(self, style: StyleDefinition) -> None:
        _extend_unique(self.class_names, style.class_names)
        self.custom_properties.extend(style.custom_properties)
        _extend_unique(self.component_class_names, style.component_class_names)


@dataclass
class DomHint:
    """Markup hints pulled from one ClojureScript file."""

    source_file: str
    data_attributes: List[str] = field(default_factory=list)
    element_ids: List[str] = field(default_factory=list)
    component_names: List[str] = field(default_factory=list)


@dataclass
class DomCorpus:
    data_attributes: List[str] = field(default_factory=list)
    element_ids: List[str] = field(default_factory=list)
    component_names: List[str] = field(default_factory=list)

    def merge(self, hint: DomHint) -> None:
        _extend_unique(self.data_attributes, hint.data_attributes)
        _extend_unique(self.element_ids, hint.element_ids)
        _extend_unique(self.component_names, hint.component_names)


@dataclass(frozen=True)
class FunctionRecord:
    """A function declaration found in ClojureScript source."""

    name: str
    parameters: tuple[str, ...]
    docstring: str
    namespace: str
    source_file: str
    exported: bool

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "parameters": list(self.parameters),
            "docstring": self.docstring,
            "namespace": self.namespace,
            "file": self.source_file,
            "exported": self.exported,
        }


@dataclass
class SourceFunctions:
    """Namespace and function declarations found in one source file."""

    source_file: str
    namespace: Optional[str] = None
    exported: List[FunctionRecord] = field(default_factory=list)
    internal: List[FunctionRecord] = field(default_factory=list)


@dataclass
class FunctionCorpus:
    """Ordered function records; the same name may appear more than once."""

    records: List[FunctionRecord] = field(default_factory=list)
    namespaces: List[str] = field(default_factory=list)
    exported_count: int = 0

    def merge(self, functions: SourceFunctions) -> None:
        self.records.extend(functions.exported)
        self.records.extend(functions.internal)
        self.exported_count += len(functions.exported)
        if functions.namespace:
            _extend_unique(self.namespaces, [functions.namespace])


@dataclass
class FileScan:
    """Everything one scanner extracted from one file."""

    source_file: str
    definitions: List[RawDefinition] = field(default_factory=list)
    style: Optional[StyleDefinition] = None
    dom: Optional[DomHint] = None
    functions: Optional[SourceFunctions] = None


@dataclass
class Corpus:
    """Everything gathered from one aggregation pass over a source tree."""

    root: str
    files: List[str] = field(default_factory=list)
    definitions: DefinitionCorpus = field(default_factory=DefinitionCorpus)
    styles: StyleCorpus = field(default_factory=StyleCorpus)
    dom: DomCorpus = field(default_factory=DomCorpus)
    functions: FunctionCorpus = field(default_factory=FunctionCorpus)


@dataclass(frozen=True)
class AnalysisStatistics:
    """Summary counts reported by the functionality analysis."""

    total_exported: int
    total_analyzed: int
    namespaces: int
    categories: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "totalExported": self.total_exported,
            "totalAnalyzed": self.total_analyzed,
            "namespaces": self.namespaces,
            "categories": self.categories,
        }


CategoryBucket = Dict[str, List[FunctionRecord]]


def _extend_unique(target: List[str], values: Iterable[str]) -> None:
    seen = set(target)
    for value in values:
        if value not in seen:
            target.append(value)
            seen.add(value)
