"""
Tokenizer tests

Token kinds, attributes, text merging and raw <style> bodies.
"""

import io

import pytest

from nausicaa.lib.errors import TokenizerError
from nausicaa.lib.tokenizer import HTMLTokenizer, tokens_fromStream
from nausicaa.models import Token, TokenKind


def tokenize(source):
    data = source.encode("utf-8") if isinstance(source, str) else source
    return list(tokens_fromStream(io.BytesIO(data), "test.html"))


class TestTokenKinds:
    """Test that each construct yields the right token kind"""

    def test_element_with_text(self):
        """Start tag, text, end tag"""
        tokens = tokenize("<p>Hello</p>")

        assert tokens == [
            Token(TokenKind.START_TAG, "p"),
            Token(TokenKind.TEXT, "Hello"),
            Token(TokenKind.END_TAG, "p"),
        ]

    def test_self_closing(self):
        """Trailing slash gives a self-closing token"""
        tokens = tokenize('<include path="x.html" />')

        assert tokens == [Token(TokenKind.SELF_CLOSING_TAG, "include", [("path", "x.html")])]

    def test_comment_and_doctype(self):
        """Comments and doctype get their own kinds"""
        tokens = tokenize("<!DOCTYPE html><!-- note -->")

        assert [t.kind for t in tokens] == [TokenKind.DOCTYPE, TokenKind.COMMENT]
        assert tokens[1].data == " note "

    def test_empty_input(self):
        """Empty input gives no tokens"""
        assert tokenize("") == []


class TestAttributes:
    """Test attribute extraction"""

    def test_order_and_case(self):
        """Attributes keep source order; names are lower-cased"""
        tokens = tokenize('<INPUT Type="text" class="a b">')

        assert tokens[0].data == "input"
        assert tokens[0].attrs == [("type", "text"), ("class", "a b")]

    def test_valueless_attribute(self):
        """Valueless attribute has an empty value"""
        tokens = tokenize("<input disabled>")

        assert tokens[0].attrs == [("disabled", "")]

    def test_entities_decoded(self):
        """Character references are decoded"""
        tokens = tokenize('<a title="Tom &amp; Jerry">x</a>')

        assert tokens[0].attrs == [("title", "Tom & Jerry")]


class TestText:
    """Test text tokens"""

    def test_entities_decoded(self):
        """Character references are decoded"""
        tokens = tokenize("<p>a &lt; b&nbsp;c</p>")

        assert tokens[1].data == "a < b\u00a0c"

    def test_fragments_merged(self):
        """A stray '<' does not split a run of text"""
        tokens = tokenize("<p>1 < 2 and 3 > 2</p>")

        assert [t.kind for t in tokens] == [TokenKind.START_TAG, TokenKind.TEXT, TokenKind.END_TAG]
        assert tokens[1].data == "1 < 2 and 3 > 2"

    def test_text_across_chunks(self):
        """Text split over read chunks is still one token"""

        class SmallChunks(HTMLTokenizer):
            chunk_size = 3

        stream = io.BytesIO("<p>Hello, world</p>".encode("utf-8"))
        tokens = list(SmallChunks(stream, "test.html").tokens())

        assert tokens[1] == Token(TokenKind.TEXT, "Hello, world")
        assert len(tokens) == 3

    def test_multibyte_across_chunks(self):
        """UTF-8 sequences split between chunks decode correctly"""

        class SmallChunks(HTMLTokenizer):
            chunk_size = 1

        stream = io.BytesIO("<p>héllo wörld</p>".encode("utf-8"))
        tokens = list(SmallChunks(stream, "test.html").tokens())

        assert tokens[1].data == "héllo wörld"

    def test_invalid_utf8(self):
        """Undecodable input is a TokenizerError"""
        with pytest.raises(TokenizerError, match="test.html: invalid UTF-8"):
            tokenize(b"<p>\xff\xfe</p>")


class TestStyle:
    """Test raw text handling of <style>"""

    def test_style_body_is_raw(self):
        """Markup-looking text inside <style> is not tokenized"""
        tokens = tokenize("<style>a > b { content: '<p>'; }</style>")

        assert tokens == [
            Token(TokenKind.START_TAG, "style"),
            Token(TokenKind.TEXT, "a > b { content: '<p>'; }"),
            Token(TokenKind.END_TAG, "style"),
        ]

    def test_unterminated_style_flushed(self):
        """The body of a <style> without a closing tag still arrives"""
        tokens = tokenize("<style>\n.foo{color:red}\n")

        assert tokens == [
            Token(TokenKind.START_TAG, "style"),
            Token(TokenKind.TEXT, "\n.foo{color:red}\n"),
        ]
