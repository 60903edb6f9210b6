"""Unit tests for the Markdown section splitter."""

from __future__ import annotations

from markdown_rag.ingestion.sections import split_sections


class TestSplitSections:
    def test_no_headings_is_one_introduction_section(self) -> None:
        sections = split_sections("plain text\nmore text")
        assert len(sections) == 1
        assert sections[0].section == "Introduction"
        assert sections[0].headers == []
        assert sections[0].content == "plain text\nmore text"

    def test_preamble_before_first_heading(self) -> None:
        sections = split_sections("preface\n# Title\nbody")
        assert [s.section for s in sections] == ["Introduction", "Title"]
        assert sections[1].content == "# Title\nbody"

    def test_heading_line_is_part_of_content(self) -> None:
        sections = split_sections("# A\nalpha\n## B\nbeta")
        assert sections[0].content == "# A\nalpha"
        assert sections[1].content == "## B\nbeta"

    def test_header_hierarchy(self) -> None:
        sections = split_sections("# A\n## B\n### C\ntext\n## D\nmore")
        assert sections[2].headers == ["A", "B", "C"]
        # A level-2 heading drops the level-3 header.
        assert sections[3].headers == ["A", "D"]

    def test_skipped_levels_stay_empty(self) -> None:
        sections = split_sections("# A\n### C\ntext")
        assert sections[1].headers == ["A", None, "C"]
        assert sections[1].section == "C"

    def test_heading_only_sections_are_kept(self) -> None:
        sections = split_sections("# First\n# Second\nbody")
        assert [s.section for s in sections] == ["First", "Second"]
        assert sections[0].content == "# First"
        assert sections[1].headers == ["Second"]

    def test_blank_preamble_is_dropped(self) -> None:
        sections = split_sections("\n\n   \n# Title\nbody")
        assert [s.section for s in sections] == ["Title"]

    def test_hash_without_space_is_not_a_heading(self) -> None:
        sections = split_sections("#hashtag\ntext")
        assert len(sections) == 1
        assert sections[0].section == "Introduction"

    def test_seven_hashes_is_not_a_heading(self) -> None:
        sections = split_sections("####### deep\ntext")
        assert sections[0].section == "Introduction"

    def test_snapshots_are_independent(self) -> None:
        sections = split_sections("# A\ntext\n## B\ntext")
        assert sections[0].headers == ["A"]
        assert sections[1].headers == ["A", "B"]

    def test_sections_cover_all_text(self) -> None:
        text = "intro\n# A\nalpha\n## B\nbeta"
        joined = "\n".join(s.content for s in split_sections(text))
        assert joined == text

    def test_crlf_line_endings(self) -> None:
        sections = split_sections("# Guide\r\nSome body text.\r\n## Setup\r\nInstall it.\r\n")
        assert [s.section for s in sections] == ["Guide", "Setup"]
        assert sections[1].headers == ["Guide", "Setup"]
        assert all("\r" not in s.section for s in sections)
