"""
Ref registry for one component

A ref attribute (<a ref="readme">) names an element or included component
so it is exposed as a field of the generated component type.
"""

from typing import Dict, Iterator, Optional, Tuple

from ..models.component import RefEntry
from ..models.reserved import refName_disallowedReason
from .errors import DisallowedRefNameError, DuplicateRefNameError


class RefRegistry:
    """
    Map from ref name to the element that declared it

    Enforces that each name is declared once per component and that it can
    be used as a Go struct field. Iteration follows declaration order.
    """

    def __init__(self, path: str) -> None:
        """
        Args:
            path: Component path, for error reporting
        """
        self.path = path
        self.entries: Dict[str, RefEntry] = {}

    def name_check(self, ref: str) -> None:
        """
        Validate a ref name without registering it

        Raises:
            DisallowedRefNameError: If the name is a keyword, reserved, or
                                    not a valid identifier
        """
        reason = refName_disallowedReason(ref)
        if reason is not None:
            raise DisallowedRefNameError(self.path, ref, reason)

    def register(
        self, ref: str, tag_name: str, var_name: str, type_name: Optional[str] = None
    ) -> RefEntry:
        """
        Record a ref declared on an element

        Args:
            ref: Ref attribute value
            tag_name: Tag of the declaring element
            var_name: Variable holding the element
            type_name: Included component type for <include ref="...">

        Returns:
            The stored entry

        Raises:
            DisallowedRefNameError: If the name cannot be used
            DuplicateRefNameError: If the name was already declared
        """
        self.name_check(ref)
        previous = self.entries.get(ref)
        if previous is not None:
            raise DuplicateRefNameError(self.path, ref, previous.tag_name)
        entry = RefEntry(tag_name=tag_name, var_name=var_name, type_name=type_name)
        self.entries[ref] = entry
        return entry

    def get(self, ref: str) -> Optional[RefEntry]:
        return self.entries.get(ref)

    def items(self) -> Iterator[Tuple[str, RefEntry]]:
        return iter(list(self.entries.items()))

    def __len__(self) -> int:
        return len(self.entries)
