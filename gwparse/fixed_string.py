"""Grammar element matching one literal string."""

from gwparse.grammar_element import GrammarElement
from gwparse.parse_rc import ErrorType, ParseRc


class FixedString(GrammarElement):
    """Matches a fixed piece of text; offers it as a candidate for a prefix."""

    def __init__(self, text: str, element_name: str = "") -> None:
        super().__init__("FixedString", element_name)
        self.text = text

    def parse(self, text, out, candidate_depth=1, start_child=0):
        out.grammar_element = self
        if text.startswith(self.text):
            return self._matched(out, self.text)
        if self.text.startswith(text):
            return self._completion(out, len(text), self.text)
        return ParseRc(error_type=ErrorType.UNEXPECTED_TEXT)

    def dot_node(self) -> str:
        return self._dot_label(f"'{self.text}'")

    def __str__(self) -> str:
        return self.text