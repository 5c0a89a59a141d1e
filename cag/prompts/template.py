"""
PromptTemplate class for chunk prompts.
"""
from typing import List, Dict, Any, Optional

from cag.errors import InvalidConfiguration

TEXT_MARKER = "{text}"


class PromptTemplate:
    """
    An immutable prompt template with a single ``{text}`` marker.

    The marker is replaced with the literal chunk text. Other braces in the
    template are left untouched, and marker-like substrings inside the chunk
    are not escaped or re-expanded.

    Attributes:
        name: Unique identifier for the template
        template: The template string containing the marker
        description: Human-readable description of the template's purpose
        version: Version of the template for tracking changes
        tags: List of tags for categorizing templates
    """

    __slots__ = ("_name", "_template", "_description", "_version", "_tags")

    def __init__(
        self,
        template: str,
        name: str = "custom",
        description: Optional[str] = None,
        version: str = "1.0",
        tags: Optional[List[str]] = None
    ):
        if not isinstance(template, str):
            raise InvalidConfiguration(f"Prompt template must be a string, got {type(template).__name__}")

        marker_count = template.count(TEXT_MARKER)
        if marker_count != 1:
            raise InvalidConfiguration(
                f"Prompt template '{name}' must contain exactly one {TEXT_MARKER} marker, found {marker_count}"
            )

        self._name = name
        self._template = template
        self._description = description or f"Template for {name}"
        self._version = version
        self._tags = tuple(tags or ())

    @property
    def name(self) -> str:
        return self._name

    @property
    def template(self) -> str:
        return self._template

    @property
    def description(self) -> str:
        return self._description

    @property
    def version(self) -> str:
        return self._version

    @property
    def tags(self) -> List[str]:
        return list(self._tags)

    def format(self, text: str) -> str:
        """Substitute the chunk text into the template."""
        head, tail = self._template.split(TEXT_MARKER, 1)
        return head + text + tail

    def to_dict(self) -> Dict[str, Any]:
        """Convert the template to a dictionary for serialization."""
        return {
            "name": self.name,
            "template": self.template,
            "description": self.description,
            "version": self.version,
            "tags": self.tags
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PromptTemplate':
        """Create a template from a dictionary."""
        return cls(
            template=data["template"],
            name=data.get("name", "custom"),
            description=data.get("description"),
            version=data.get("version", "1.0"),
            tags=data.get("tags")
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PromptTemplate):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self._name, self._template, self._version))

    def __str__(self) -> str:
        return f"PromptTemplate({self.name}, version={self.version})"

    def __repr__(self) -> str:
        return f"PromptTemplate(name='{self.name}', template={self.template!r})"
