"""
Default prompt templates with metadata.

Each template takes a single chunk of text through the ``{text}`` marker.
Templates used with recursive generation should produce output shorter than
their input so that repeated passes converge.
"""
from typing import Dict, Any

SUMMARIZE = {
    "description": "Summarize a chunk of text",
    "version": "1.0",
    "tags": ["summary"],
    "template": """Summarize the following text in a few sentences. Keep names, numbers and dates.

Text:
{text}

Summary:"""
}

REFINE_SUMMARY = {
    "description": "Condense partial summaries produced by earlier passes",
    "version": "1.0",
    "tags": ["summary", "recursive"],
    "template": """The following text is a sequence of partial summaries of a longer document.
Merge them into a single shorter summary, removing repetition.

Partial summaries:
{text}

Merged summary:"""
}

EXTRACT_KEY_POINTS = {
    "description": "Extract key points from a chunk of text as a bulleted list",
    "version": "1.0",
    "tags": ["extraction"],
    "template": """List the key points of the following text as short bullet points.
Return only the list.

Text:
{text}"""
}

TRANSLATE = {
    "description": "Translate a chunk of text into English",
    "version": "1.0",
    "tags": ["translation"],
    "template": """Translate the following text into English. Return only the translation.

{text}"""
}

DEFAULT_PROMPTS: Dict[str, Dict[str, Any]] = {
    "summarize": SUMMARIZE,
    "refine_summary": REFINE_SUMMARY,
    "extract_key_points": EXTRACT_KEY_POINTS,
    "translate": TRANSLATE,
}
