"""Grammar element matching text up to an unescaped delimiter."""

from gwparse.grammar_element import GrammarElement


class EscapedString(GrammarElement):
    """Matches text free of the escaped characters unless they are escaped.

    The escape character itself always counts as an escaped character.
    """

    def __init__(self, escaped_characters: str, escape_character: str, element_name: str = ""):
        super().__init__("EscapedString", element_name)
        if escape_character not in escaped_characters:
            escaped_characters += escape_character
        self.escaped_characters = escaped_characters
        self.escape_character = escape_character

    def parse(self, text, out, candidate_depth=1, start_child=0):
        out.grammar_element = self
        special = self.escaped_characters
        pieces: list[str] = []
        pos = 0
        while pos < len(text):
            char = text[pos]
            following = text[pos + 1 : pos + 2]
            if char not in special:
                pieces.append(char)
                pos += 1
            elif char == self.escape_character and following and following in special:
                pieces.append(following)
                pos += 2
            else:
                break
        rc = self._matched(out, text[:pos])
        out.unescaped_text = "".join(pieces)
        return rc

    def _pattern(self) -> str:
        return f"[^{self.escaped_characters}]*"

    def dot_node(self) -> str:
        return self._dot_label(f"'{self._pattern()} esc: {self.escape_character}'")

    def __str__(self) -> str:
        prefix = f"{self.element_name}:{self.instance_id} " if self.element_name else ""
        return f"{prefix}/{self._pattern()}  escaped by {self.escape_character}"