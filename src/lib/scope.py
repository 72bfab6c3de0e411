"""
Scope tracking for the component compiler

- ScopeStack: ancestor chain of open elements within one component
- IncludeHistory: component paths currently being compiled along the
  active include chain, in entry order
"""

from typing import Dict, Iterator, List, Optional

from ..models.component import ScopeFrame


class ScopeStack:
    """
    Open elements of the component being compiled

    The depth of the stack is the current nesting depth. A frame popped
    from a stack that is then empty was a root of the component.
    """

    def __init__(self) -> None:
        self.frames: List[ScopeFrame] = []

    def push(self, frame: ScopeFrame) -> None:
        self.frames.append(frame)

    def pop(self) -> ScopeFrame:
        """Remove and return the innermost open element"""
        return self.frames.pop()

    def peek(self) -> Optional[ScopeFrame]:
        """Innermost open element, or None at top level"""
        if not self.frames:
            return None
        return self.frames[-1]

    def __len__(self) -> int:
        return len(self.frames)

    def tagNames_list(self) -> List[str]:
        """Tag names of open elements, outermost first"""
        return [frame.tag_name for frame in self.frames]


class IncludeHistory:
    """
    Insertion-ordered set of in-flight component paths

    One instance is created per top-level input and passed down through
    every include it triggers. Paths are added on entry and removed on exit,
    so a path that is already present on entry means an include cycle.

    Example:
        >>> history = IncludeHistory()
        >>> history.add('a.html'); history.add('b.html')
        >>> list(history)
        ['a.html', 'b.html']
        >>> history.remove('a.html')
        >>> 'a.html' in history
        False
    """

    def __init__(self) -> None:
        # dicts keep insertion order
        self.entries: Dict[str, None] = {}

    def add(self, path: str) -> None:
        self.entries.setdefault(path, None)

    def remove(self, path: str) -> None:
        self.entries.pop(path, None)

    def __contains__(self, path: object) -> bool:
        return path in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.entries))

    def __len__(self) -> int:
        return len(self.entries)
