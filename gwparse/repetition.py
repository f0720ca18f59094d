"""Grammar element matching its child any number of times."""

from __future__ import annotations

from typing import Optional

from gwparse.grammar_element import GrammarElement
from gwparse.parse_rc import ErrorType, ParseRc
from gwparse.parsed_element import ParsedElement


class Repetition(GrammarElement):
    """Parses its first child repeatedly until it no longer matches."""

    def __init__(self, element_name: str = "") -> None:
        super().__init__("Repetition", element_name)

    def parse(
        self,
        text: str,
        out: ParsedElement,
        candidate_depth: int = 1,
        start_child: int = 0,
    ) -> ParseRc:
        rc = ParseRc()
        child_rc = ParseRc()
        out.grammar_element = self

        child: Optional[GrammarElement] = self.children[0] if self.children else None
        successful: list[ParsedElement] = []
        over_parsed = False

        while child_rc.is_good() and child is not None:
            if rc.len_parsed_successfully >= len(text):
                # aligned with the end: parse once more to collect candidates
                over_parsed = True
            parsed = ParsedElement(parent=out)
            child_rc = child.parse(text[rc.len_parsed_successfully:], parsed)
            if child_rc.is_good() or child_rc.error_type is ErrorType.MISSING_TEXT:
                rc.len_parsed_successfully += child_rc.len_parsed_successfully
                rc.len_parsed += child_rc.len_parsed
                out.add_child(parsed)
            if child_rc.is_good():
                successful.append(parsed)
            else:
                rc.error_message = child_rc.error_message
                if child_rc.error_type is ErrorType.RETRIEVING_GRAMMAR_FAILED:
                    rc.error_type = ErrorType.RETRIEVING_GRAMMAR_FAILED

        if child_rc.is_bad() and child_rc.error_type is not ErrorType.UNEXPECTED_TEXT:
            for candidate in child_rc.candidates:
                wrapper = ParsedElement(parent=out.parent, grammar_element=self)
                wrapper.set_stops()
                for previous in successful:
                    wrapper.add_child(previous)
                wrapper.add_child(candidate)
                rc.candidates.append(wrapper)
            if over_parsed:
                rc.error_type = ErrorType.SUCCESS
            elif child_rc.error_type is ErrorType.RETRIEVING_GRAMMAR_FAILED:
                rc.error_message = child_rc.error_message
                rc.error_type = ErrorType.RETRIEVING_GRAMMAR_FAILED
            else:
                rc.error_type = ErrorType.MISSING_TEXT
        else:
            # zero matches are allowed as well
            rc.error_type = ErrorType.SUCCESS

        return rc

    def __str__(self) -> str:
        return f"({self.children[0]})*"