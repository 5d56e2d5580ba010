"""Tests for profile.py — cover profile reading.

Covers mode line handling, block parsing, per-file grouping and rejection of
malformed lines.
"""

from __future__ import annotations

import pytest

from covgroup.errors import ProfileFormatError
from covgroup.models import Block
from covgroup.profile import parse_profiles

# ── Sample cover profile ────────────────────────────────────────

_GO_COVER_PROFILE = """\
mode: set
example.com/mypkg/foo.go:5.2,7.4 2 1
example.com/mypkg/foo.go:10.1,12.3 3 0
example.com/mypkg/bar.go:1.1,3.2 2 2
"""


class TestParseProfiles:
    def test_groups_blocks_by_file(self) -> None:
        profiles = parse_profiles(_GO_COVER_PROFILE)
        assert [p.file_name for p in profiles] == [
            "example.com/mypkg/foo.go",
            "example.com/mypkg/bar.go",
        ]
        foo = profiles[0]
        assert foo.mode == "set"
        assert foo.blocks == (
            Block(start_line=5, start_col=2, end_line=7, end_col=4, num_statements=2, count=1),
            Block(start_line=10, start_col=1, end_line=12, end_col=3, num_statements=3, count=0),
        )

    def test_empty_text_has_no_profiles(self) -> None:
        assert parse_profiles("") == []

    def test_mode_line_only(self) -> None:
        assert parse_profiles("mode: count\n") == []

    def test_mode_count(self) -> None:
        profiles = parse_profiles("mode: count\nexample.com/pkg/main.go:1.1,3.2 2 5\n")
        assert profiles[0].mode == "count"
        assert profiles[0].blocks[0].count == 5

    def test_blocks_keep_input_order_and_duplicates(self) -> None:
        content = (
            "mode: set\n"
            "example.com/pkg/a.go:20.1,22.2 2 1\n"
            "example.com/pkg/a.go:5.1,7.2 2 0\n"
            "example.com/pkg/a.go:5.1,7.2 2 0\n"
        )
        blocks = parse_profiles(content)[0].blocks
        assert [b.start_line for b in blocks] == [20, 5, 5]

    def test_interleaved_files_keep_first_seen_order(self) -> None:
        content = (
            "mode: set\n"
            "example.com/b/b.go:1.1,2.2 1 0\n"
            "example.com/a/a.go:1.1,2.2 1 1\n"
            "example.com/b/b.go:3.1,4.2 1 1\n"
        )
        profiles = parse_profiles(content)
        assert [p.file_name for p in profiles] == ["example.com/b/b.go", "example.com/a/a.go"]
        assert len(profiles[0].blocks) == 2

    def test_only_newline_ends_a_line(self) -> None:
        profiles = parse_profiles("mode: set\ngithub.com/o/r/a\x85b.go:1.1,2.2 1 1\n")
        assert profiles[0].file_name == "github.com/o/r/a\x85b.go"

    def test_crlf_line_endings(self) -> None:
        profiles = parse_profiles("mode: set\r\nexample.com/pkg/a.go:1.1,2.2 1 1\r\n")
        assert profiles[0].mode == "set"
        assert profiles[0].blocks[0].count == 1

    def test_file_name_containing_colon(self) -> None:
        profiles = parse_profiles("mode: set\nexample.com/pkg/odd:name.go:1.1,2.2 1 1\n")
        assert profiles[0].file_name == "example.com/pkg/odd:name.go"


class TestParseProfilesErrors:
    def test_missing_mode_line(self) -> None:
        with pytest.raises(ProfileFormatError, match="bad mode line"):
            parse_profiles("example.com/pkg/a.go:1.1,2.2 1 1\n")

    def test_empty_mode(self) -> None:
        with pytest.raises(ProfileFormatError, match="bad mode line"):
            parse_profiles("mode: \nexample.com/pkg/a.go:1.1,2.2 1 1\n")

    def test_malformed_block_line(self) -> None:
        content = "mode: set\nthis-is-not-a-valid-coverage-line\n"
        with pytest.raises(ProfileFormatError, match="line 2"):
            parse_profiles(content)

    def test_missing_count(self) -> None:
        with pytest.raises(ProfileFormatError):
            parse_profiles("mode: set\nexample.com/pkg/a.go:1.1,2.2 1\n")

    def test_interior_blank_line(self) -> None:
        content = "mode: set\na/b/c.go:1.1,2.2 1 1\n\na/b/d.go:1.1,2.2 1 1"
        with pytest.raises(ProfileFormatError, match="line 3"):
            parse_profiles(content)
