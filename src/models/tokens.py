"""
Tokenizer data models

Token kinds and the token record produced by lib.tokenizer.HTMLTokenizer.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple


class TokenKind(Enum):
    """
    Kinds of token produced while lexing a component file

    End of input is not a token: the token iterator simply stops.
    """
    START_TAG = "start-tag"                 # <div class="x">
    END_TAG = "end-tag"                     # </div>
    SELF_CLOSING_TAG = "self-closing-tag"   # <include path="x.html" />
    TEXT = "text"                           # character data between tags
    COMMENT = "comment"                     # <!-- ... -->
    DOCTYPE = "doctype"                     # <!DOCTYPE html>, <?pi>, <![CDATA[...]]>


@dataclass
class Token:
    """
    One lexical token from a component file

    Attributes:
        kind: Token kind
        data: Lower-cased tag name for tag tokens, decoded text for TEXT,
              raw body for COMMENT/DOCTYPE
        attrs: Ordered (name, value) pairs for START_TAG/SELF_CLOSING_TAG.
               Attributes written without a value carry "".

    Example:
        '<input type="text" disabled/>' lexes to
        Token(kind=TokenKind.SELF_CLOSING_TAG, data="input",
              attrs=[("type", "text"), ("disabled", "")])
    """
    kind: TokenKind
    data: str
    attrs: List[Tuple[str, str]] = field(default_factory=list)


# Elements that never have content; a start tag closes them implicitly
VOID_ELEMENTS: FrozenSet[str] = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
})


def void_is(tag_name: str) -> bool:
    """Check if a tag names an HTML void element"""
    return tag_name in VOID_ELEMENTS
