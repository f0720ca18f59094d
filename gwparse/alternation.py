"""Grammar element matching one of several alternatives."""

from __future__ import annotations

from typing import Optional

from gwparse.grammar_element import GrammarElement
from gwparse.parse_rc import ErrorType, ParseRc
from gwparse.parsed_element import ParsedElement


class Alternation(GrammarElement):
    """Parses the child that matches the longest text, or gathers candidates."""

    def __init__(self, element_name: str = "") -> None:
        super().__init__("Alternation", element_name)

    def parse(
        self,
        text: str,
        out: ParsedElement,
        candidate_depth: int = 1,
        start_child: int = 0,
    ) -> ParseRc:
        rc = ParseRc()
        out.grammar_element = self

        candidate_list: list[ParsedElement] = []
        winner: Optional[ParsedElement] = None
        winner_element: Optional[GrammarElement] = None
        maybe_winner: Optional[ParsedElement] = None
        maybe_winner_element: Optional[GrammarElement] = None
        maybe_count = 0
        # forks are not allowed in the first pass; a unique choice is parsed
        # again afterwards with the full depth
        reduced_depth = candidate_depth - 1 if candidate_depth > 0 else candidate_depth
        maybe_list: list[GrammarElement] = []

        for child in self.children:
            parsed = ParsedElement(parent=out)
            child_rc = child.parse(text, parsed, reduced_depth)
            if child_rc.is_good():
                if rc.len_parsed_successfully <= child_rc.len_parsed_successfully:
                    rc.len_parsed_successfully = child_rc.len_parsed_successfully
                    rc.len_parsed = child_rc.len_parsed
                    winner = parsed
                    winner_element = child
                maybe_list.append(child)
            if child_rc.error_type is ErrorType.MISSING_TEXT:
                maybe_winner = parsed
                maybe_winner_element = child
                maybe_count += 1
                maybe_list.append(child)
            elif child_rc.error_type is ErrorType.RETRIEVING_GRAMMAR_FAILED:
                rc.error_message = rc.error_message + child_rc.error_message + " "
                rc.error_type = ErrorType.RETRIEVING_GRAMMAR_FAILED
            candidate_list.extend(child_rc.candidates)

        if winner is not None and winner_element is not None:
            out.add_child(winner)
            candidate_list = winner_element.parse(
                text, ParsedElement(), candidate_depth
            ).candidates
            # keep other alternatives only if they branch off after the winner
            for child in maybe_list:
                if child is winner_element:
                    continue
                child_rc = child.parse(text, ParsedElement(parent=out), reduced_depth)
                if child_rc.len_parsed < rc.len_parsed:
                    continue
                candidate_list.extend(child_rc.candidates)
        else:
            if maybe_count == 1 and maybe_winner is not None and maybe_winner_element is not None:
                out.add_child(maybe_winner)
                candidate_list = maybe_winner_element.parse(
                    text, ParsedElement(), candidate_depth
                ).candidates

            if rc.error_type is not ErrorType.RETRIEVING_GRAMMAR_FAILED:
                if not self.children:
                    rc.error_type = ErrorType.SUCCESS
                elif not candidate_list:
                    rc.error_type = ErrorType.UNEXPECTED_TEXT
                else:
                    rc.error_type = ErrorType.MISSING_TEXT
                    rc.len_parsed = len(text)

        for candidate in candidate_list:
            candidate_root = ParsedElement(parent=out.parent, grammar_element=self)
            candidate_root.add_child(candidate)
            rc.candidates.append(candidate_root)

        return rc

    def __str__(self) -> str:
        inner = "||".join(str(child) for child in self.children)
        if len(self.children) > 1:
            return f"({inner})"
        return inner