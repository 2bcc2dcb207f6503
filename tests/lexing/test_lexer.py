"""Tests for the single-pass lexer."""

import pytest

from elmsweep.exceptions import ConfigurationError, SourceFileNotFoundError
from elmsweep.lexing import (
    CommentKind,
    ImportStatement,
    Lexer,
    TokenKind,
    keyword_at,
)


class TestKeywordBoundary:
    @pytest.mark.parametrize("content", ["import A", "import\nA", "import{- c -} A"])
    def test_accepts_terminators(self, content):
        assert keyword_at(content, 0, "import")

    @pytest.mark.parametrize("content", ["imports", "import_x", "importA", "import"])
    def test_rejects_longer_identifiers(self, content):
        assert not keyword_at(content, 0, "import")

    def test_rejects_identifier_suffix(self):
        assert not keyword_at("submodule X", 3, "module")

    def test_accepts_after_space(self):
        assert keyword_at("port module X", 5, "module")


class TestNextToken:
    def test_line_comment_then_resume(self):
        """A line comment spans exactly up to the newline; scanning resumes after it."""
        lexer = Lexer("-- note\ncode")
        token, offset = lexer.next_token(0)
        assert token.kind is TokenKind.COMMENT
        assert token.value == "-- note"
        assert token.payload.kind is CommentKind.LINE
        assert offset == 7

        newline, offset = lexer.next_token(offset)
        assert newline.kind is TokenKind.NONE
        assert newline.value == ""
        assert offset == lexer.content.index("code")

    def test_nested_block_comment_is_one_token(self):
        content = "{- outer {- inner -} still outer -}"
        token, offset = Lexer(content).next_token(0)
        assert token.kind is TokenKind.COMMENT
        assert token.payload.kind is CommentKind.BLOCK
        assert (token.start, token.end) == (0, len(content))
        assert offset == len(content)

    def test_import_statement(self):
        content = "import Foo.Bar as FB exposing (a, b)\nx = 1"
        token, offset = Lexer(content).next_token(0)
        assert token.kind is TokenKind.IMPORT_STATEMENT
        assert token.payload == ImportStatement("Foo.Bar", "FB", ("a", "b"))
        assert token.value == "import Foo.Bar as FB exposing (a, b)"
        assert offset == content.index("\nx")

    def test_plain_character_is_marker(self):
        token, offset = Lexer("x").next_token(0)
        assert token.is_marker
        assert (token.start, token.end, offset) == (0, 1, 1)

    def test_identifier_starting_with_keyword_is_plain_text(self):
        lexer = Lexer("importance = 1")
        token, offset = lexer.next_token(0)
        assert token.kind is TokenKind.NONE
        assert offset == 1


class TestRun:
    def test_collects_imports_in_order(self, sample_source):
        result = Lexer(sample_source.strip()).run()
        assert [imp.dotted_name for imp in result.imports] == [
            "Browser",
            "Html",
            "Html.Attributes",
            "Json.Decode",
        ]
        assert result.imports[2].alias == "Attr"
        assert result.imports[3].exposing == ("Decoder", "field")

    def test_commented_out_import_is_ignored(self, sample_source):
        result = Lexer(sample_source.strip()).run()
        assert "Commented.Out" not in [imp.dotted_name for imp in result.imports]

    def test_module_statement(self, sample_source):
        result = Lexer(sample_source.strip()).run()
        assert result.module_statement.dotted_name == "Main"
        assert result.module_statement.exposing == ("Model", "Msg(..)", "main")

    def test_import_inside_block_comment_is_ignored(self):
        content = "x = 1\n{-\nimport Hidden\n-}\nimport Shown"
        result = Lexer(content).run()
        assert [imp.dotted_name for imp in result.imports] == ["Shown"]

    def test_statement_span_ends_inside_following_comment(self):
        """A column-zero line inside a comment still ends the statement before it."""
        content = "import A\n{-\nimport Hidden\n-}"
        result = Lexer(content).run()
        assert [imp.dotted_name for imp in result.imports] == ["A", "Hidden"]

    def test_top_level_comments_are_collected(self):
        content = "x = 1\n-- one\ny = {- two -} 2"
        result = Lexer(content).run()
        assert [c.kind for c in result.comments] == [CommentKind.LINE, CommentKind.BLOCK]

    def test_markers(self):
        result = Lexer("a b\nc").run()
        assert result.spaces == [1]
        assert result.newlines == [3]

    def test_tokens_cover_content(self):
        content = "module M exposing (x)\n\nimport A\n\nx = 1 -- c"
        tokens = list(Lexer(content).tokens())
        assert tokens[0].start == 0
        assert tokens[-1].end == len(content)
        for prev, nxt in zip(tokens, tokens[1:]):
            assert prev.end == nxt.start

    def test_empty_content(self):
        result = Lexer("").run()
        assert result.imports == []
        assert result.module_statement is None


class TestFromFile:
    def test_missing_file_is_configuration_error(self, tmp_path):
        with pytest.raises(SourceFileNotFoundError) as exc_info:
            Lexer.from_file(tmp_path / "Missing.elm")
        assert isinstance(exc_info.value, ConfigurationError)

    def test_content_is_trimmed(self, tmp_path):
        path = tmp_path / "A.elm"
        path.write_text("\n\n  module A exposing (..)\n\n")
        lexer = Lexer.from_file(path)
        assert lexer.content == "module A exposing (..)"
        assert lexer.path == str(path)
