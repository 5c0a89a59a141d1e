"""
Prompt templates for chunked generation.

The main components are:
- PromptTemplate: An immutable template with a single {text} marker
- PromptRegistry: Registry for named templates
- template_registry: Global singleton instance of the registry

Example usage:
    from cag.prompts import template_registry
    
    # Get a prompt template by name
    template = template_registry.get("summarize")
    
    # Format a prompt with a chunk
    prompt = template.format("...")
    
    # Register a custom prompt
    template_registry.register("headline", "Write a headline for: {text}")
"""

from cag.prompts.registry import PromptRegistry, template_registry
from cag.prompts.template import PromptTemplate, TEXT_MARKER

__all__ = ['PromptRegistry', 'PromptTemplate', 'TEXT_MARKER', 'template_registry']
