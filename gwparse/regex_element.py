"""Grammar element matching a regular expression at the start of the text."""

import re

from gwparse.grammar_element import GrammarElement
from gwparse.parse_rc import ErrorType, ParseRc


class RegEx(GrammarElement):
    """Matches a regular expression anchored at the current position."""

    def __init__(self, pattern: str, element_name: str = "") -> None:
        super().__init__("RegEx", element_name)
        self.pattern = pattern
        self._regex = re.compile(pattern)

    def parse(self, text, out, candidate_depth=1, start_child=0):
        out.grammar_element = self
        match = self._regex.match(text)
        if match is not None:
            return self._matched(out, match.group(0))
        error = ErrorType.UNEXPECTED_TEXT if text else ErrorType.MISSING_TEXT
        rc = ParseRc(error_type=error)
        rc.len_parsed = len(text)
        return rc

    def dot_node(self) -> str:
        return self._dot_label(f"'{self.pattern}'", document=False)

    def __str__(self) -> str:
        if self.element_name:
            return f"/{self.element_name}:{self.instance_id}/"
        if self.pattern:
            return f"/{self.pattern}/"
        return f"{self.type_name}(UnnamedRegex:{self.instance_id})"