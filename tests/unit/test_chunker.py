"""Unit tests for the word-window chunker."""

from __future__ import annotations

import math

import pytest

from markdown_rag.ingestion.chunker import chunk_document, chunk_section
from markdown_rag.ingestion.models import Section


def _words(n: int, prefix: str = "w") -> str:
    return " ".join(f"{prefix}{i}" for i in range(n))


def _section(n: int) -> Section:
    return Section(headers=["Top", None, "Deep"], content=_words(n), section="Deep")


class TestChunkSection:
    def test_small_section_is_one_chunk(self) -> None:
        chunks = chunk_section(_section(10), "doc.md", 7)
        assert len(chunks) == 1
        meta = chunks[0].metadata
        assert meta.chunk_index == 7
        assert meta.word_count == 10
        assert meta.section == "Deep"
        assert meta.filename == "doc.md"

    def test_single_chunk_keeps_formatting_and_omits_headers(self) -> None:
        section = Section(headers=["A"], content="# A\n\nline one\nline two", section="A")
        chunk = chunk_section(section, "doc.md")[0]
        assert chunk.content == section.content
        assert chunk.metadata.headers is None
        assert "headers" not in chunk.metadata.to_record()

    def test_exactly_max_words_is_one_chunk(self) -> None:
        chunks = chunk_section(_section(1000), "doc.md")
        assert len(chunks) == 1
        assert chunks[0].metadata.word_count == 1000

    @pytest.mark.parametrize("total", [1001, 1900, 1901, 2500, 5000])
    def test_chunk_count_formula(self, total: int) -> None:
        chunks = chunk_section(_section(total), "doc.md")
        assert len(chunks) == math.ceil((total - 1000) / 900) + 1
        assert chunks[-1].content.split()[-1] == f"w{total - 1}"

    def test_consecutive_chunks_overlap_by_100_words(self) -> None:
        chunks = chunk_section(_section(2500), "doc.md")
        for prev, nxt in zip(chunks, chunks[1:]):
            assert prev.content.split()[-100:] == nxt.content.split()[:100]

    def test_de_overlapped_chunks_reconstruct_section(self) -> None:
        section = _section(3333)
        chunks = chunk_section(section, "doc.md")
        words = chunks[0].content.split()
        for chunk in chunks[1:]:
            words.extend(chunk.content.split()[100:])
        assert words == section.content.split()

    def test_multi_chunk_metadata(self) -> None:
        chunks = chunk_section(_section(2000), "doc.md", 3)
        assert [c.metadata.chunk_index for c in chunks] == [3, 4, 5]
        assert all(c.metadata.headers == ["Top", None, "Deep"] for c in chunks)
        assert [c.metadata.word_count for c in chunks] == [1000, 1000, 200]

    def test_word_count_matches_content(self) -> None:
        for chunk in chunk_section(_section(2345), "doc.md"):
            assert chunk.metadata.word_count == len(chunk.content.split())

    def test_ids_are_unique(self) -> None:
        chunks = chunk_section(_section(5000), "doc.md")
        assert len({c.id for c in chunks}) == len(chunks)

    def test_custom_sizes(self) -> None:
        chunks = chunk_section(_section(25), "doc.md", max_chunk_size=10, overlap_size=5)
        assert len(chunks) == 4
        assert chunks[1].content.split()[0] == "w5"

    @pytest.mark.parametrize(("size", "overlap"), [(10, 10), (10, 20), (0, 0), (10, -1)])
    def test_invalid_sizes_raise(self, size: int, overlap: int) -> None:
        with pytest.raises(ValueError):
            chunk_section(_section(5), "doc.md", max_chunk_size=size, overlap_size=overlap)


class TestChunkDocument:
    def test_indices_are_continuous_across_sections(self) -> None:
        text = "\n".join(
            [
                "# One",
                _words(1500, "a"),
                "## Two",
                _words(50, "b"),
                "# Three",
                _words(2100, "c"),
            ]
        )
        chunks = chunk_document(text, "doc.md")
        assert [c.metadata.chunk_index for c in chunks] == list(range(len(chunks)))
        assert [c.metadata.section for c in chunks] == ["One", "One", "Two", "Three", "Three", "Three"]

    def test_no_overlap_across_sections(self) -> None:
        text = f"# One\n{_words(1200, 'a')}\n# Two\n{_words(10, 'b')}"
        chunks = chunk_document(text, "doc.md")
        assert chunks[-1].content.startswith("# Two")
        assert not any(word.startswith("a") for word in chunks[-1].content.split())

    def test_document_without_headings(self) -> None:
        chunks = chunk_document("just a few words", "plain.md")
        assert len(chunks) == 1
        assert chunks[0].metadata.section == "Introduction"
        assert chunks[0].metadata.chunk_index == 0

    def test_whitespace_only_document_yields_nothing(self) -> None:
        assert chunk_document(" \n\n\t", "blank.md") == []

    def test_headings_only_document(self) -> None:
        chunks = chunk_document("# A\n# B", "doc.md")
        assert [c.content for c in chunks] == ["# A", "# B"]
        assert [c.metadata.word_count for c in chunks] == [2, 2]

    def test_wire_record_uses_camel_case(self) -> None:
        record = chunk_document("# A\nbody", "doc.md")[0].metadata.to_record()
        assert record == {
            "filename": "doc.md",
            "chunkIndex": 0,
            "section": "A",
            "wordCount": 3,
        }
