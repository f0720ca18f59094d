"""Nodes of a parse tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from gwparse.grammar_element import GrammarElement


def _next_depth(depth: Optional[int]) -> Optional[int]:
    return None if depth is None else depth - 1


class ParsedElement:
    """A node of a parse tree, referring to the grammar element that produced it.

    An element without a parent is its own parent and acts as a tree root.
    """

    def __init__(
        self,
        parent: Optional[ParsedElement] = None,
        grammar_element: Optional[GrammarElement] = None,
    ) -> None:
        self.grammar_element = grammar_element
        self.parent: ParsedElement = self if parent is None else parent
        self.children: list[ParsedElement] = []
        self.raw_text = ""
        self.unescaped_text = ""
        self._stops = False
        self._incomplete = False

    def _element_name(self) -> Optional[str]:
        if self.grammar_element is None:
            return None
        return self.grammar_element.element_name

    def add_child(self, element: ParsedElement) -> ParsedElement:
        """Attach a child, reparenting it to this element, and return it."""
        element.parent = self
        self.children.append(element)
        return element

    def matched_string_raw(self) -> str:
        """The complete matched text of this subtree, escape characters kept."""
        return self.raw_text + "".join(
            child.matched_string_raw() for child in self.children
        )

    def matched_string(self) -> str:
        """The complete matched text of this subtree, escapes resolved."""
        own = self.unescaped_text or self.raw_text
        return own + "".join(child.matched_string() for child in self.children)

    def debug_string(self, prefix: str = "") -> str:
        """A multi-line dump of the whole subtree."""
        element = self.grammar_element
        if element is None:
            return "!!Uninitialized Element!!"
        state = "stopped" if self._stops else "alive"
        result = (
            f"{prefix}{element.type_name}({element.element_name}/{element.tag}): "
            f' matched string: "{self.matched_string()}" '
            f' document: "{element.document}" '
            f"({state})\n"
        )
        for child in self.children:
            result += child.debug_string(prefix + "  ")
        return result

    def find_first_child(self, element_name: str, depth: Optional[int] = None) -> str:
        """Matched string of the first element with this name, or ''."""
        found = self.find_first_subtree(element_name, depth)
        return "" if found is None else found.matched_string()

    def find_first_subtree(
        self, element_name: str, depth: Optional[int] = None
    ) -> Optional[ParsedElement]:
        """Depth-first search for an element by name.

        A depth of 0 checks only this element, 1 its children as well, and
        so on; None searches without limit. Returns None if nothing matches.
        """
        if self._element_name() == element_name:
            return self
        if depth == 0:
            return None
        for child in self.children:
            found = child.find_first_subtree(element_name, _next_depth(depth))
            if found is not None:
                return found
        return None

    def find_all_subtrees(
        self,
        element_name: str,
        stop_at_match: bool = False,
        depth: Optional[int] = None,
    ) -> list[ParsedElement]:
        """All elements with this name, in depth-first order.

        With stop_at_match the search does not descend into matching elements.
        """
        result: list[ParsedElement] = []
        self._collect(element_name, stop_at_match, depth, result)
        return result

    def _collect(
        self,
        element_name: str,
        stop_at_match: bool,
        depth: Optional[int],
        result: list[ParsedElement],
    ) -> None:
        if self._element_name() == element_name:
            result.append(self)
            if stop_at_match:
                return
        if depth == 0:
            return
        for child in self.children:
            child._collect(element_name, stop_at_match, _next_depth(depth), result)

    def short_document(self) -> str:
        """Documentation of the rightmost documented node of the subtree."""
        for child in reversed(self.children):
            doc = child.short_document()
            if doc:
                return doc
        if self.grammar_element is None:
            return ""
        return self.grammar_element.document

    def root(self) -> ParsedElement:
        """The root of the tree this element belongs to."""
        result = self.parent
        while result.parent is not result:
            result = result.parent
        return result

    def set_stops(self) -> None:
        """Mark the rightmost leaf of this subtree as a stopping point."""
        node = self
        while node.children:
            node = node.children[-1]
        node._stops = True

    def is_stopped(self) -> bool:
        """True if any node of this subtree is marked as stopping."""
        return self._stops or any(child.is_stopped() for child in self.children)

    def mark_incomplete(self) -> None:
        """Record that this element was only partly parsed."""
        self._incomplete = True

    def is_completely_parsed(self) -> bool:
        """True unless the element was marked as partly parsed."""
        return not self._incomplete