"""Tests for heading-based section splitting and slugs."""

from sitesearch.pipeline.sections import slug, split_into_sections


class TestSplitIntoSections:
    """Test section splitting."""

    def test_splits_on_headings(self, sample_markdown):
        """Test each heading starts a new section in document order."""
        sections = split_into_sections(sample_markdown)

        assert [s.title for s in sections] == [
            "Getting Started",
            "Install on Linux",
            "Install on macOS",
            "Homebrew",
        ]

    def test_preamble_is_dropped(self, sample_markdown):
        """Test lines before the first heading are discarded."""
        sections = split_into_sections(sample_markdown)

        assert all("Intro text" not in s.content for s in sections)

    def test_body_lines_accumulate(self):
        """Test non-heading lines are kept verbatim in the body."""
        sections = split_into_sections("# A\nline 1\n\nline 2\n# B\nline 3")

        assert sections[0].body_lines == ("line 1", "", "line 2")
        assert sections[0].content == "line 1\n\nline 2"
        assert sections[1].content == "line 3"

    def test_consecutive_headings_give_empty_body(self):
        """Test a heading directly followed by another heading."""
        sections = split_into_sections("## First\n### Second\ntext")

        assert sections[0].title == "First"
        assert sections[0].body_lines == ()
        assert sections[1].body_lines == ("text",)

    def test_no_headings(self):
        """Test text without headings yields no sections."""
        assert split_into_sections("just text\nmore text") == []
        assert split_into_sections("") == []

    def test_heading_shape(self):
        """Test only 1-6 markers followed by whitespace count as headings."""
        text = "\n".join([
            "# One",
            "###### Six",
            "####### Seven",
            "#NoSpace",
            " # Indented",
            "##\tTabbed",
        ])

        sections = split_into_sections(text)

        assert [s.title for s in sections] == ["One", "Six", "Tabbed"]
        assert sections[1].body_lines == ("####### Seven", "#NoSpace", " # Indented")

    def test_marker_and_whitespace_stripped(self):
        """Test heading title has markers and following whitespace removed."""
        sections = split_into_sections("##    Spaced Title  ")

        assert sections[0].title == "Spaced Title  "


class TestSlug:
    """Test heading anchor slugs."""

    def test_lowercase_and_hyphens(self):
        assert slug("Getting Started") == "getting-started"

    def test_punctuation_stripped(self):
        assert slug("What's new in v20?") == "whats-new-in-v20"
        assert slug("fs.readFile(path)") == "fsreadfilepath"

    def test_deterministic(self):
        assert slug("Install on Linux") == slug("Install on Linux")

    def test_underscores_kept(self):
        assert slug("process_env") == "process_env"
        assert slug("NODE_OPTIONS") == "node_options"

    def test_backticks_dropped_dunder_kept(self):
        assert slug("`__dirname`") == "__dirname"

    def test_each_space_becomes_hyphen(self):
        assert slug("a - b") == "a---b"
        assert slug("-leading and trailing-") == "-leading-and-trailing-"

    def test_unicode_letters_kept(self):
        assert slug("Über Streams") == "über-streams"
