"""Grammar element that obtains its grammar lazily at parse time."""

from __future__ import annotations

import abc
from typing import Optional

from gwparse.grammar_element import GrammarElement
from gwparse.parse_rc import ErrorType, ParseRc
from gwparse.parsed_element import ParsedElement


class GrammarRetrievalError(Exception):
    """Raised by get_grammar when the grammar could not be obtained."""


class GrammarInjector(GrammarElement):
    """Fetches its child grammar on first parse, then parses through it."""

    def __init__(self, type_name: str, element_name: str = "") -> None:
        super().__init__("GrammarInjector::" + type_name, element_name)

    def parse(
        self,
        text: str,
        out: ParsedElement,
        candidate_depth: int = 1,
        start_child: int = 0,
    ) -> ParseRc:
        if not self.children:
            rc = ParseRc()
            try:
                grammar = self.get_grammar(out.root())
            except GrammarRetrievalError as error:
                rc.error_message = str(error)
                grammar = None
            if grammar is None:
                rc.error_type = (
                    ErrorType.RETRIEVING_GRAMMAR_FAILED
                    if rc.error_message
                    else ErrorType.UNEXPECTED_TEXT
                )
                return rc
            self.add_child(grammar)

        out.grammar_element = self
        child = ParsedElement(parent=out)
        child_rc = self.children[0].parse(text, child, candidate_depth)
        out.add_child(child)
        return child_rc

    @abc.abstractmethod
    def get_grammar(self, parse_tree: ParsedElement) -> Optional[GrammarElement]:
        """Return the grammar to inject, or None if there is none.

        Raise GrammarRetrievalError with a message if retrieving it failed.
        """