"""
HTML tokenizer for component files

Wraps the standard library html.parser.HTMLParser so that its callbacks
become a pull-style stream of Token objects, which is what the component
compiler's loop consumes.

Behaviour worth knowing:
- Tag and attribute names are lower-cased; entities in text and attribute
  values are decoded.
- Adjacent text fragments are merged, so one run of character data is
  always exactly one TEXT token.
- <style> and <script> bodies are raw text. An unterminated <style> body is
  still delivered as text at end of input.

Example:
    >>> tokens = list(HTMLTokenizer(io.BytesIO(b'<p class="x">hi</p>')).tokens())
    >>> [t.kind.value for t in tokens]
    ['start-tag', 'text', 'end-tag']
"""

import codecs
from collections import deque
from html.parser import HTMLParser
from typing import BinaryIO, Deque, Iterator, List, Optional, Tuple

from ..models.tokens import Token, TokenKind
from .errors import TokenizerError


class HTMLTokenizer(HTMLParser):
    """
    Pull tokenizer over a binary component stream

    Reads the stream in chunks, decoding UTF-8 incrementally, and yields
    tokens as soon as they are complete.
    """

    chunk_size = 64 * 1024

    def __init__(self, stream: BinaryIO, path: str = "<stream>") -> None:
        """
        Args:
            stream: Binary stream positioned at the start of the component
            path: Source path, for error reporting
        """
        super().__init__(convert_charrefs=True)
        self.stream = stream
        self.path = path
        self.pending: Deque[Token] = deque()

    # ─── HTMLParser overrides ───

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        self.token_add(Token(TokenKind.START_TAG, tag, attrs_normalize(attrs)))

    def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        self.token_add(Token(TokenKind.SELF_CLOSING_TAG, tag, attrs_normalize(attrs)))

    def handle_endtag(self, tag: str) -> None:
        self.token_add(Token(TokenKind.END_TAG, tag))

    def handle_data(self, data: str) -> None:
        if self.pending and self.pending[-1].kind is TokenKind.TEXT:
            self.pending[-1].data += data
            return
        self.token_add(Token(TokenKind.TEXT, data))

    def handle_comment(self, data: str) -> None:
        self.token_add(Token(TokenKind.COMMENT, data))

    def handle_decl(self, decl: str) -> None:
        self.token_add(Token(TokenKind.DOCTYPE, decl))

    def handle_pi(self, data: str) -> None:
        self.token_add(Token(TokenKind.DOCTYPE, data))

    def unknown_decl(self, data: str) -> None:
        self.token_add(Token(TokenKind.DOCTYPE, data))

    def close(self) -> None:
        super().close()
        # Older HTMLParser versions keep an unterminated raw-text body
        # buffered forever; flush it as text.
        if self.cdata_elem is not None and self.rawdata:
            self.handle_data(self.rawdata)
            self.rawdata = ""

    # ─── Token stream ───

    def token_add(self, token: Token) -> None:
        """Queue a completed token"""
        self.pending.append(token)

    def tokens(self) -> Iterator[Token]:
        """
        Iterate over the tokens of the stream

        A trailing TEXT token is held back until the next chunk arrives,
        since its text may continue there.

        Yields:
            Token objects in source order

        Raises:
            TokenizerError: If the stream is not valid UTF-8
        """
        decoder = codecs.getincrementaldecoder("utf-8")()
        while True:
            chunk = self.stream.read(self.chunk_size)
            final = not chunk
            try:
                text = decoder.decode(chunk, final=final)
            except UnicodeDecodeError as e:
                raise TokenizerError(self.path, f"invalid UTF-8 input: {e.reason} at byte {e.start}") from e

            if text:
                self.feed(text)
            if final:
                self.close()
                while self.pending:
                    yield self.pending.popleft()
                return

            while len(self.pending) > 1 or (
                self.pending and self.pending[0].kind is not TokenKind.TEXT
            ):
                yield self.pending.popleft()


def attrs_normalize(attrs: List[Tuple[str, Optional[str]]]) -> List[Tuple[str, str]]:
    """Replace the None value of valueless attributes with ''"""
    return [(k, v if v is not None else "") for k, v in attrs]


def tokens_fromStream(stream: BinaryIO, path: str = "<stream>") -> Iterator[Token]:
    """
    Convenience wrapper: tokenize a binary stream

    Args:
        stream: Binary stream to tokenize
        path: Source path, for error reporting

    Returns:
        Iterator of Token objects
    """
    return HTMLTokenizer(stream, path).tokens()
