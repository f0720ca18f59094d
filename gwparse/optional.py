"""Grammar element whose single child may be present or absent."""

from gwparse.grammar_element import GrammarElement
from gwparse.parse_rc import ErrorType, ParseRc
from gwparse.parsed_element import ParsedElement


class Optional(GrammarElement):
    """Parses its first child if possible and succeeds otherwise."""

    def __init__(self, element_name: str = "") -> None:
        super().__init__("Optional", element_name)

    def parse(self, text, out, candidate_depth=1, start_child=0):
        out.grammar_element = self
        if not self.children:
            return self._incomplete_grammar()

        rc = ParseRc()
        parsed = ParsedElement(parent=out)
        child_rc = self.children[0].parse(text, parsed)
        if child_rc.is_good():
            rc.len_parsed_successfully += child_rc.len_parsed_successfully
            rc.len_parsed += child_rc.len_parsed
            out.add_child(parsed)

        if child_rc.error_type is not ErrorType.UNEXPECTED_TEXT:
            for candidate in child_rc.candidates:
                wrapper = self._stopped_candidate(out)
                wrapper.add_child(candidate)
                rc.candidates.append(wrapper)
            if child_rc.len_parsed_successfully == 0:
                # the option not taken is a candidate too
                rc.candidates.append(self._stopped_candidate(out))

        if child_rc.error_type is ErrorType.MISSING_TEXT and child_rc.len_parsed >= 1:
            rc.len_parsed += child_rc.len_parsed
            rc.error_type = ErrorType.MISSING_TEXT
        elif child_rc.error_type is ErrorType.RETRIEVING_GRAMMAR_FAILED:
            rc.error_message = child_rc.error_message
            rc.error_type = ErrorType.RETRIEVING_GRAMMAR_FAILED
        return rc

    def _stopped_candidate(self, out: ParsedElement) -> ParsedElement:
        candidate = ParsedElement(parent=out.parent, grammar_element=self)
        candidate.set_stops()
        return candidate

    def __str__(self) -> str:
        return "[" + "".join(str(child) for child in self.children) + "]"