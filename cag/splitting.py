"""
Text splitting backed by LangChain's recursive character splitter.
"""

from typing import List, Optional, Sequence

from langchain_text_splitters import RecursiveCharacterTextSplitter

from cag.interfaces import ITextSplitter

DEFAULT_SEPARATORS = ["\n\n", "\n", " ", ""]


class RecursiveSplitter(ITextSplitter):
    """
    Splits text on paragraph, line and word boundaries, falling back to single
    characters, so that chunks stay within ``chunk_size`` characters.
    """
    
    def __init__(self, chunk_size: int, chunk_overlap: int = 0, separators: Optional[Sequence[str]] = None):
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.separators = list(separators or DEFAULT_SEPARATORS)
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            separators=self.separators
        )
    
    def split(self, text: str) -> List[str]:
        """Split text into overlapping chunks. Empty input yields no chunks."""
        if not text:
            return []
        return self._splitter.split_text(text)
