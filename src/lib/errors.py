"""
Error taxonomy for component generation

Every user-input error is attributable to the component file it was found
in; str(error) is "<path>: <message>". Any of these aborts the whole run.
"""

from typing import List


class NausicaaError(Exception):
    """Base class for errors raised while generating components"""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class IncludeCycleError(NausicaaError):
    """Raised when a component (transitively) includes itself"""

    def __init__(self, path: str, cycle: List[str]) -> None:
        self.cycle = cycle
        super().__init__(path, f"cycle in include paths ({' -> '.join(cycle)})")


class MissingPathAttributeError(NausicaaError):
    """Raised when <include> has no path attribute"""

    def __init__(self, path: str) -> None:
        super().__init__(path, 'missing required "path" attribute in <include>')


class InvalidIncludeAttributeError(NausicaaError):
    """Raised when <include> has an unknown or repeated attribute"""

    def __init__(self, path: str, attribute: str, repeated: bool = False) -> None:
        self.attribute = attribute
        if repeated:
            message = f'<include> specifies attribute "{attribute}" more than once'
        else:
            message = f'<include> specifies invalid attribute "{attribute}"'
        super().__init__(path, message)


class DisallowedRefNameError(NausicaaError):
    """Raised when a ref name cannot be used as a struct field"""

    def __init__(self, path: str, ref: str, reason: str) -> None:
        self.ref = ref
        self.reason = reason
        super().__init__(path, f'ref name "{ref}" disallowed ({reason})')


class DuplicateRefNameError(NausicaaError):
    """Raised when a ref name is declared twice in one component"""

    def __init__(self, path: str, ref: str, previous_tag: str) -> None:
        self.ref = ref
        self.previous_tag = previous_tag
        super().__init__(
            path,
            f'ref name "{ref}" present multiple times (previous occurence in <{previous_tag}>)',
        )


class MissingStyleBodyError(NausicaaError):
    """Raised when a top-level <style> is not followed by its text"""

    def __init__(self, path: str) -> None:
        super().__init__(path, "cannot find <style> text")


class FileOpenError(NausicaaError):
    """Raised when a component file cannot be opened or read"""

    def __init__(self, path: str, cause: OSError) -> None:
        self.cause = cause
        super().__init__(path, cause.strerror or str(cause))


class TokenizerError(NausicaaError):
    """Raised when a component file cannot be tokenized"""


class UnbalancedEndTagError(NausicaaError):
    """Raised for an end tag with no open element"""

    def __init__(self, path: str, tag_name: str) -> None:
        self.tag_name = tag_name
        super().__init__(path, f"end tag </{tag_name}> has no matching start tag")


class UnclosedElementError(NausicaaError):
    """Raised when elements are still open at end of input"""

    def __init__(self, path: str, tag_names: List[str]) -> None:
        self.tag_names = tag_names
        tags = ", ".join(f"<{t}>" for t in tag_names)
        super().__init__(path, f"unclosed element(s) at end of input: {tags}")


class IncludeContentError(NausicaaError):
    """Raised when <include> is given children or text content"""

    def __init__(self, path: str) -> None:
        super().__init__(path, "<include> cannot have content")


class FormatterError(Exception):
    """
    Raised when the formatter rejects generated source

    This is a generator defect, not an input error.
    """
    pass


class BindingsError(Exception):
    """Raised when a binding table cannot be loaded or is malformed"""
    pass
