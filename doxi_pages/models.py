"""Data models for Doxi class records and the documents rendered from them."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ClassInfo:
    """The class entry of a Doxi record, with documented defaults."""

    name: str | None = None  # None when the record carries no class name
    text: str = ""
    items: list[Any] = field(default_factory=list)  # member groups, keyed by "$type"


@dataclass
class DocumentModel:
    """Renderer-ready data for one class page."""

    class_name: str | None
    class_text: str
    configs: list[dict[str, Any]] = field(default_factory=list)
    events: list[dict[str, Any]] = field(default_factory=list)
    methods: list[dict[str, Any]] = field(default_factory=list)
    properties: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DocumentModel":
        """Build a model from the flat template-facing mapping."""
        return cls(
            class_name=data.get("className"),
            class_text=data.get("classText", ""),
            configs=data.get("configs", []),
            events=data.get("events", []),
            methods=data.get("methods", []),
            properties=data.get("properties", []),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the flat mapping handed to the page template."""
        return {
            "className": self.class_name,
            "classText": self.class_text,
            "configs": self.configs,
            "events": self.events,
            "methods": self.methods,
            "properties": self.properties,
        }


@dataclass(frozen=True)
class LinkTag:
    """A parsed ``{@link target label}`` tag."""

    target: str
    label: str | None = None


@dataclass(frozen=True)
class ImageTag:
    """A parsed ``{@img source caption}`` tag."""

    source: str
    caption: str | None = None  # parsed but not rendered


@dataclass(frozen=True)
class NoMatch:
    """Text that is not a complete inline tag."""

    text: str


InlineTag = LinkTag | ImageTag | NoMatch


@dataclass
class ConversionSummary:
    """Counts reported by a batch conversion run."""

    written: int = 0
    failed: int = 0
