"""Tests for scaffold.transformer: header scanning and metadata block."""

import pytest

from lcode.errors import MalformedScaffoldError, UnreadableScaffoldError
from lcode.scaffold.transformer import (
    ScaffoldMetadata,
    js_string,
    normalize,
    parse_header,
    rewrite_scaffold_file,
)

TWO_SUM = (
    "/**\n"
    " * [1]. Two Sum\n"
    " * https://leetcode.com/problems/two-sum\n"
    " * Difficulty: Easy\n"
    " */\n"
)

LEETCODE_CLI_HEADER = (
    "/*\n"
    " * @lc app=leetcode id=42 lang=typescript\n"
    " *\n"
    " * [42] Trapping Rain Water\n"
    " *\n"
    " * https://leetcode.com/problems/trapping-rain-water/description/\n"
    " *\n"
    " * algorithms\n"
    " * Hard (58.72%)\n"
    " * Likes:    27000\n"
    " */\n"
    "\n"
    "// @lc code=start\n"
    "function trap(height: number[]): number {\n"
    "\n"
    "};\n"
    "// @lc code=end\n"
)

EXPECTED_TWO_SUM_BLOCK = (
    "\n"
    "module.exports = {\n"
    "    id:'1',\n"
    "    title:'Two Sum',\n"
    "    url:'https://leetcode.com/problems/two-sum',\n"
    "    difficulty:'Easy',\n"
    "}"
)


@pytest.mark.unit
class TestNormalizeWellFormed:

    def test_appends_metadata_block(self):
        assert normalize(TWO_SUM) == TWO_SUM + EXPECTED_TWO_SUM_BLOCK

    def test_original_content_is_prefix(self):
        result = normalize(LEETCODE_CLI_HEADER)
        assert result.startswith(LEETCODE_CLI_HEADER)

    def test_leetcode_cli_header_fields(self):
        result = normalize(LEETCODE_CLI_HEADER)
        block = result[len(LEETCODE_CLI_HEADER):]
        assert "id:'42'," in block
        assert "title:'Trapping Rain Water'," in block
        assert "url:'https://leetcode.com/problems/trapping-rain-water/description/'," in block
        assert "difficulty:'Hard'," in block

    def test_title_without_dot_after_id(self):
        content = TWO_SUM.replace("[1]. Two Sum", "[123] Two Sum")
        metadata = parse_header(content)
        assert metadata.id == "123"
        assert metadata.title == "Two Sum"


@pytest.mark.unit
class TestParseHeader:

    def test_returns_metadata(self):
        assert parse_header(TWO_SUM) == ScaffoldMetadata(
            id="1",
            title="Two Sum",
            url="https://leetcode.com/problems/two-sum",
            difficulty="Easy",
        )

    def test_hash_comment_header(self):
        content = (
            "#\n"
            "# @lc app=leetcode id=70 lang=python3\n"
            "#\n"
            "# [70] Climbing Stairs\n"
            "#\n"
            "# https://leetcode.com/problems/climbing-stairs/\n"
            "#\n"
            "# Easy (52.10%)\n"
        )
        metadata = parse_header(content)
        assert metadata.id == "70"
        assert metadata.title == "Climbing Stairs"
        assert metadata.difficulty == "Easy"

    def test_first_title_line_wins(self):
        content = TWO_SUM.replace(" */\n", " * [2] Add Two Numbers\n */\n")
        assert parse_header(content).id == "1"

    def test_difficulty_word_in_title_is_not_taken(self):
        content = (
            " * [999] Hard Choices\n"
            " * https://leetcode.com/problems/hard-choices\n"
            " * Medium (40.00%)\n"
        )
        metadata = parse_header(content)
        assert metadata.title == "Hard Choices"
        assert metadata.difficulty == "Medium"

    def test_difficulty_must_be_whole_word(self):
        content = (
            " * [5] Longest Palindromic Substring\n"
            " * https://leetcode.com/problems/longest-palindromic-substring\n"
            " * Hardly anything\n"
            " * Medium\n"
        )
        assert parse_header(content).difficulty == "Medium"

    def test_url_stops_at_whitespace(self):
        content = TWO_SUM.replace(
            "https://leetcode.com/problems/two-sum",
            "https://leetcode.com/problems/two-sum/ (description)",
        )
        assert parse_header(content).url == "https://leetcode.com/problems/two-sum/"

    def test_lines_after_code_start_are_ignored(self):
        content = (
            "// @lc code=start\n"
            "// [1] Two Sum\n"
            "// https://leetcode.com/problems/two-sum\n"
            "// Easy\n"
        )
        with pytest.raises(MalformedScaffoldError):
            parse_header(content)

    def test_crlf_line_endings(self):
        metadata = parse_header(TWO_SUM.replace("\n", "\r\n"))
        assert metadata.title == "Two Sum"
        assert metadata.url == "https://leetcode.com/problems/two-sum"


@pytest.mark.unit
class TestMalformedScaffold:

    def test_missing_title_line(self):
        content = TWO_SUM.replace(" * [1]. Two Sum\n", "")
        with pytest.raises(MalformedScaffoldError) as exc_info:
            normalize(content)
        assert exc_info.value.missing == ["title line"]

    def test_missing_url_line(self):
        content = TWO_SUM.replace(" * https://leetcode.com/problems/two-sum\n", "")
        with pytest.raises(MalformedScaffoldError) as exc_info:
            normalize(content)
        assert exc_info.value.missing == ["url line"]

    def test_missing_difficulty(self):
        content = TWO_SUM.replace(" * Difficulty: Easy\n", "")
        with pytest.raises(MalformedScaffoldError) as exc_info:
            normalize(content)
        assert exc_info.value.missing == ["difficulty"]

    def test_empty_content_reports_everything(self):
        with pytest.raises(MalformedScaffoldError) as exc_info:
            normalize("")
        assert exc_info.value.missing == ["title line", "url line", "difficulty"]

    def test_bracket_without_title_is_not_a_title_line(self):
        content = TWO_SUM.replace("[1]. Two Sum", "[1].")
        with pytest.raises(MalformedScaffoldError):
            normalize(content)


@pytest.mark.unit
class TestLiteralEscaping:

    def test_quote_in_title_is_escaped(self):
        content = TWO_SUM.replace("Two Sum", "Rock'n'Roll")
        assert "title:'Rock\\'n\\'Roll'," in normalize(content)

    def test_backslash_is_escaped(self):
        assert js_string("a\\b") == "'a\\\\b'"

    def test_line_separators_are_escaped(self):
        assert js_string("a\u2028b") == "'a\\u2028b'"

    def test_plain_value_is_quoted(self):
        assert js_string("Two Sum") == "'Two Sum'"


@pytest.mark.unit
class TestRewriteScaffoldFile:

    def test_rewrites_file_in_place(self, tmp_path):
        path = tmp_path / "index.ts"
        path.write_text(TWO_SUM, encoding="utf-8")

        metadata = rewrite_scaffold_file(str(path))

        assert metadata.id == "1"
        assert path.read_text(encoding="utf-8") == TWO_SUM + EXPECTED_TWO_SUM_BLOCK

    def test_malformed_file_is_left_untouched(self, tmp_path):
        path = tmp_path / "index.ts"
        path.write_text("// nothing here\n", encoding="utf-8")

        with pytest.raises(MalformedScaffoldError):
            rewrite_scaffold_file(str(path))

        assert path.read_text(encoding="utf-8") == "// nothing here\n"

    def test_non_utf8_file_raises_unreadable(self, tmp_path):
        path = tmp_path / "index.ts"
        raw = b" * [1] Caf\xe9\n * https://leetcode.com/problems/cafe/\n * Easy\n"
        path.write_bytes(raw)

        with pytest.raises(UnreadableScaffoldError) as exc_info:
            rewrite_scaffold_file(str(path))

        assert exc_info.value.path == str(path)
        assert path.read_bytes() == raw
