"""
PromptRegistry class for looking up chunk prompt templates by name.
"""
from typing import Dict, List, Optional, Any, Union
import yaml

from cag.prompts.template import PromptTemplate
from cag.utils.logging import get_logger

logger = get_logger(__name__)


class PromptRegistry:
    """
    Central registry for prompt templates.

    Templates are registered under a name and retrieved either as
    PromptTemplate objects or already formatted with a chunk of text.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._templates: Dict[str, PromptTemplate] = {}
        self._initialized = False

    def register(
        self,
        name: str,
        template: Union[str, PromptTemplate],
        description: Optional[str] = None,
        version: str = "1.0",
        tags: Optional[List[str]] = None,
        override: bool = False
    ) -> PromptTemplate:
        """
        Register a prompt template.

        Args:
            name: Unique identifier for the template
            template: The template string or PromptTemplate object
            description: Human-readable description of the template's purpose
            version: Version of the template for tracking changes
            tags: List of tags for categorizing templates
            override: Whether to override an existing template with the same name

        Returns:
            The registered PromptTemplate object

        Raises:
            ValueError: If a template with the same name already exists and override=False
            InvalidConfiguration: If the template does not contain exactly one text marker
        """
        if name in self._templates and not override:
            raise ValueError(f"Template '{name}' already exists. Use override=True to replace it.")

        if isinstance(template, str):
            template_obj = PromptTemplate(
                template=template,
                name=name,
                description=description,
                version=version,
                tags=tags
            )
        else:
            template_obj = template

        self._templates[name] = template_obj
        logger.debug(f"Registered template '{name}'")

        return template_obj

    def get(self, name: str) -> PromptTemplate:
        """
        Get a prompt template by name.

        Raises:
            KeyError: If no template with the given name exists
        """
        self.load_defaults()
        if name in self._templates:
            return self._templates[name]
        raise KeyError(f"No template found with name '{name}'")

    def has_template(self, name: str) -> bool:
        """Check if a template exists."""
        self.load_defaults()
        return name in self._templates

    def format(self, name: str, text: str) -> str:
        """Format a named template with a chunk of text."""
        return self.get(name).format(text)

    def list_templates(self) -> List[str]:
        """List all registered template names."""
        self.load_defaults()
        return sorted(self._templates.keys())

    def load_from_yaml(self, yaml_path: str) -> None:
        """
        Load templates from a YAML file.

        The file maps template names either to a template string or to a
        mapping with ``template`` and optional metadata keys. A top-level
        ``prompts`` section is also accepted.

        Raises:
            IOError: If the file cannot be read
            yaml.YAMLError: If the file is not valid YAML
            InvalidConfiguration: If a template is malformed
        """
        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f) or {}

        templates_data = data.get('prompts', data)

        for name, template_data in templates_data.items():
            if isinstance(template_data, str):
                self.register(name=name, template=template_data, override=True)
            elif isinstance(template_data, dict):
                self.register(
                    name=name,
                    template=template_data['template'],
                    description=template_data.get('description'),
                    version=str(template_data.get('version', '1.0')),
                    tags=template_data.get('tags'),
                    override=True
                )
            else:
                logger.warning(f"Skipping template '{name}' in {yaml_path}: unsupported value")

        logger.info(f"Loaded templates from YAML file {yaml_path}")

    def load_defaults(self) -> None:
        """Load the templates shipped with the package. Runs at most once."""
        if self._initialized:
            return
        self._initialized = True

        from cag.prompts.defaults import DEFAULT_PROMPTS

        for name, template_data in DEFAULT_PROMPTS.items():
            # Keep user registrations made before the defaults were loaded
            if name in self._templates:
                continue
            self.register(
                name=name,
                template=template_data["template"],
                description=template_data.get("description"),
                version=template_data.get("version", "1.0"),
                tags=template_data.get("tags")
            )

        logger.debug("Loaded default prompt templates")

    def to_dict(self) -> Dict[str, Any]:
        """Convert registry to a dictionary for serialization."""
        return {name: template.to_dict() for name, template in self._templates.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PromptRegistry':
        """Create a registry from a dictionary."""
        registry = cls()
        for name, template_data in data.items():
            registry.register(name, PromptTemplate.from_dict(template_data), override=True)
        return registry


# Singleton instance for global access
template_registry = PromptRegistry()
