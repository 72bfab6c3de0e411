"""
Compiler for HTML component files

Walks the token stream of one component file and emits the Go type and
constructor that build the same element tree through the binding API.

Token handling:
- Start tag: allocate a variable, create the element (or resolve an
  <include>), and open a scope
- End tag: close the scope; a closed element without a parent is a root,
  otherwise it is appended to its parent
- Self-closing tag (and void elements like <br>): start then end
- Text: bound to the enclosing element's text content; top-level text is
  dropped
- Top-level <style>: its body goes to the stylesheet and compilation of
  the component ends there
- Comments and doctypes: ignored
"""

from typing import TYPE_CHECKING, BinaryIO, Iterator, List, Optional, Tuple

from ..config import appsettings
from ..models.component import CompiledComponent, ScopeFrame
from ..models.tokens import Token, TokenKind, void_is
from .bindings import BindingTable
from .emitter import ConstructorWriter, textContent_normalize, typeDefinition_render
from .errors import (
    IncludeContentError,
    MissingStyleBodyError,
    UnbalancedEndTagError,
    UnclosedElementError,
)
from .includes import IncludeResolver
from .log import LOG
from .names import NameAllocator, component_describe, kind_fromTagName
from .refs import RefRegistry
from .scope import IncludeHistory, ScopeStack
from .tokenizer import tokens_fromStream

if TYPE_CHECKING:
    from .generator import Generator


class ComponentCompiler:
    """
    Compiles one component file

    A fresh instance is used per file, so the name counters, scope stack
    and ref registry never leak between components.

    Responsibilities:
    - Drive the tokenizer loop
    - Allocate variable names and track scope
    - Record refs and roots
    - Delegate <include> to the IncludeResolver
    - Extract a top-level <style> body
    """

    def __init__(
        self,
        generator: "Generator",
        path: str,
        history: IncludeHistory,
        bindings: BindingTable,
    ) -> None:
        """
        Initialize compiler

        Args:
            generator: Generator owning the run (used to compile includes)
            path: Canonical path of the component
            history: Include chain of the current top-level input
            bindings: Binding table for element types
        """
        self.path = path
        self.bindings = bindings
        self.component = component_describe(path)

        self.names = NameAllocator()
        self.scope = ScopeStack()
        self.refs = RefRegistry(path)
        self.includes = IncludeResolver(generator, path, history)
        self.writer = ConstructorWriter(self.component, bindings)

        self.roots: List[ScopeFrame] = []
        self.stylesheet: Optional[str] = None

    def compile(self, stream: BinaryIO) -> CompiledComponent:
        """
        Compile the component read from a stream

        Args:
            stream: Binary stream with the component's HTML

        Returns:
            CompiledComponent with the type definition, constructor and
            optional stylesheet body

        Raises:
            NausicaaError: For any structural or reference error in the file
                           or in a component it includes
        """
        tokens = tokens_fromStream(stream, self.path)

        for token in tokens:
            if token.kind is TokenKind.TEXT:
                self.text_handle(token)

            elif token.kind is TokenKind.START_TAG:
                if token.data == 'style' and not self.scope:
                    self.stylesheet = self.style_drain(tokens)
                    break
                if void_is(token.data):
                    self.selfClosing_handle(token)
                else:
                    self.startTag_handle(token)

            elif token.kind is TokenKind.END_TAG:
                self.endTag_handle(token)

            elif token.kind is TokenKind.SELF_CLOSING_TAG:
                self.selfClosing_handle(token)

            # COMMENT and DOCTYPE are ignored

        if self.scope:
            raise UnclosedElementError(self.path, self.scope.tagNames_list())

        refs = list(self.refs.items())
        return CompiledComponent(
            component=self.component,
            definition=typeDefinition_render(self.component, refs, self.bindings),
            constructor=self.writer.function_render(refs, self.roots),
            stylesheet=self.stylesheet,
            refs=dict(refs),
            roots=list(self.roots),
        )

    # ─── Token handlers ───

    def text_handle(self, token: Token) -> None:
        """Bind non-empty text to the enclosing element"""
        parent = self.scope.peek()
        text = textContent_normalize(token.data)
        if not text:
            return
        if parent is None:
            LOG(f"Dropping text outside any element: {text!r}", level=3, component=self.path)
            return
        if parent.include_is():
            raise IncludeContentError(self.path)

        literal_var = self.names.next(appsettings.string_literal_kind)
        self.writer.text_set(parent.var_name, literal_var, text)

    def startTag_handle(self, token: Token) -> None:
        frame = self.frame_open(token)
        self.scope.push(frame)

    def endTag_handle(self, token: Token) -> None:
        if void_is(token.data):
            return  # </br> and friends close nothing
        if not self.scope:
            raise UnbalancedEndTagError(self.path, token.data)
        self.frame_close(self.scope.pop())

    def selfClosing_handle(self, token: Token) -> None:
        self.frame_close(self.frame_open(token))

    def style_drain(self, tokens: Iterator[Token]) -> str:
        """
        Read the body of a top-level <style>

        The closing </style> is neither required nor checked.

        Raises:
            MissingStyleBodyError: If the next token is not text
        """
        body = next(tokens, None)
        if body is None or body.kind is not TokenKind.TEXT:
            raise MissingStyleBodyError(self.path)
        LOG(f"Extracted <style> ({len(body.data)} characters)", level=2, component=self.path)
        return body.data.strip()

    # ─── Element construction ───

    def frame_open(self, token: Token) -> ScopeFrame:
        """
        Emit construction of an element and return its scope frame

        Raises:
            IncludeContentError: If the element sits inside an <include>
        """
        parent = self.scope.peek()
        if parent is not None and parent.include_is():
            raise IncludeContentError(self.path)

        tag_name = token.data
        frame = ScopeFrame(tag_name=tag_name, var_name=self.names.next(kind_fromTagName(tag_name)))
        if frame.include_is():
            self.include_open(frame, token.attrs)
        else:
            self.element_open(frame, token.attrs)
        return frame

    def element_open(self, frame: ScopeFrame, attrs: List[Tuple[str, str]]) -> None:
        self.writer.element_create(frame.var_name, frame.tag_name)
        for key, value in attrs:
            if key == 'ref':
                self.refs.register(value, frame.tag_name, frame.var_name)
            else:
                self.writer.attribute_set(frame.var_name, key, value)

    def include_open(self, frame: ScopeFrame, attrs: List[Tuple[str, str]]) -> None:
        path_value, ref_value = self.includes.attributes_parse(attrs)
        if ref_value is not None:
            self.refs.name_check(ref_value)

        included = self.includes.resolve(path_value)
        self.writer.include_construct(frame.var_name, included.constructor_name)

        if ref_value is not None:
            self.refs.register(ref_value, frame.tag_name, frame.var_name, included.type_name)

    def frame_close(self, frame: ScopeFrame) -> None:
        """Record a closed element as a root or append it to its parent"""
        parent = self.scope.peek()
        if parent is None:
            self.roots.append(frame)
            return

        if frame.include_is():
            self.writer.includeRoots_append(parent.var_name, frame.var_name)
        else:
            self.writer.child_append(parent.var_name, frame.var_name)
