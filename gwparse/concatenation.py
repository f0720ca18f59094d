"""Grammar element matching its children one after another."""

from __future__ import annotations

from gwparse.grammar_element import GrammarElement
from gwparse.parse_rc import ErrorType, ParseRc
from gwparse.parsed_element import ParsedElement


class Concatenation(GrammarElement):
    """Parses all children in sequence, each starting where the previous ended."""

    def __init__(self, element_name: str = "") -> None:
        super().__init__("Concatenation", element_name)

    def parse(self, text, out, candidate_depth=1, start_child=0):
        out.grammar_element = self
        if not self.children:
            return self._incomplete_grammar()

        rc = ParseRc()
        for index, child in enumerate(self.children[start_child:], start_child):
            if not rc.is_good():
                break

            parsed = ParsedElement(parent=out)
            child_rc = child.parse(text[rc.len_parsed :], parsed)
            rc.len_parsed += child_rc.len_parsed
            rc.len_parsed_successfully += child_rc.len_parsed_successfully
            if child_rc.error_type is ErrorType.RETRIEVING_GRAMMAR_FAILED:
                rc.error_message = child_rc.error_message
            rc.error_type = child_rc.error_type

            rc.candidates.extend(self._expand_candidates(out, child_rc, index, candidate_depth))

            # Done after candidate evaluation: some children succeed and still
            # offer candidates, which must not include their own result twice.
            if child_rc.is_good() or child_rc.error_type is ErrorType.MISSING_TEXT:
                out.add_child(parsed)
                if not child_rc.is_good():
                    out.mark_incomplete()

        return rc

    def _expand_candidates(
        self, out: ParsedElement, child_rc: ParseRc, index: int, candidate_depth: int
    ) -> list[ParsedElement]:
        """Complete each candidate of a child by parsing the remaining children."""
        result: list[ParsedElement] = []
        several = len(child_rc.candidates) > 1
        for candidate in child_rc.candidates:
            candidate_root = ParsedElement(parent=out.parent, grammar_element=self)
            # earlier children are shared with the candidate, not reparented
            candidate_root.children.extend(out.children)
            candidate_root.add_child(candidate)

            if candidate_depth > 0 or not several:
                new_depth = candidate_depth - 1 if several else candidate_depth
                further: list[ParsedElement] = []
                if not candidate_root.is_stopped():
                    further = self.parse("", candidate_root, new_depth, index + 1).candidates
                if further:
                    result.extend(further)
                else:
                    candidate_root.set_stops()
                    result.append(candidate_root)
            elif index == 0:
                # no forks allowed, but the candidates found so far still count
                result.append(candidate_root)
        return result

    def __str__(self) -> str:
        inner = "".join(str(child) for child in self.children)
        return f"({inner})" if len(self.children) > 1 else inner