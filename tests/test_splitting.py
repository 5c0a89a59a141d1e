"""
Tests for the recursive character splitter.
"""

import pytest

from cag.splitting import RecursiveSplitter
from tests.fixtures.fixtures import load_text, get_all_texts


def test_short_text_single_chunk():
    splitter = RecursiveSplitter(chunk_size=100, chunk_overlap=20)

    assert splitter.split(load_text("short")) == ["This is a test text."]


def test_empty_text_no_chunks():
    splitter = RecursiveSplitter(chunk_size=100, chunk_overlap=20)

    assert splitter.split("") == []


@pytest.mark.parametrize("text_name", get_all_texts())
def test_chunks_respect_size(text_name):
    splitter = RecursiveSplitter(chunk_size=120, chunk_overlap=30)
    text = load_text(text_name)

    chunks = splitter.split(text)

    assert len(chunks) >= 1
    for chunk in chunks:
        assert 0 < len(chunk) <= 120


def test_chunks_cover_every_word():
    splitter = RecursiveSplitter(chunk_size=120, chunk_overlap=30)
    text = load_text("article")

    chunks = splitter.split(text)
    chunk_words = set(" ".join(chunks).split())

    assert set(text.split()) <= chunk_words


def test_adjacent_chunks_overlap():
    text = " ".join(f"w{i:02d}" for i in range(30))
    splitter = RecursiveSplitter(chunk_size=20, chunk_overlap=8)

    chunks = splitter.split(text)

    assert len(chunks) > 1
    for previous, current in zip(chunks, chunks[1:]):
        assert current.split()[0] in previous.split()


def test_no_overlap():
    text = " ".join(f"w{i:02d}" for i in range(30))
    splitter = RecursiveSplitter(chunk_size=20, chunk_overlap=0)

    chunks = splitter.split(text)

    assert " ".join(chunks).split() == text.split()
