"""Grammar element matching a run of spaces."""

from gwparse.grammar_element import GrammarElement
from gwparse.parse_rc import ErrorType, ParseRc


class WhiteSpace(GrammarElement):
    """Matches one or more spaces; offers a single space at the end of text."""

    def __init__(self) -> None:
        super().__init__("WhiteSpace")

    def parse(self, text, out, candidate_depth=1, start_child=0):
        out.grammar_element = self
        spaces = text[: len(text) - len(text.lstrip(" "))]
        if spaces:
            return self._matched(out, spaces)
        if not text:
            return self._completion(out, 0, " ")
        return ParseRc(error_type=ErrorType.UNEXPECTED_TEXT)

    def __str__(self) -> str:
        return " "