"""Result of parsing a string with a grammar element."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gwparse.parsed_element import ParsedElement


class ErrorType(enum.Enum):
    """Outcome of a parse attempt."""

    SUCCESS = "success"
    MISSING_TEXT = "missingText"
    UNEXPECTED_TEXT = "unexpectedText"
    RETRIEVING_GRAMMAR_FAILED = "retrievingGrammarFailed"


@dataclass
class ParseRc:
    """Outcome, consumed lengths and completion candidates of a parse."""

    error_type: ErrorType = ErrorType.SUCCESS
    error_message: str = ""
    len_parsed_successfully: int = 0
    len_parsed: int = 0
    candidates: list[ParsedElement] = field(default_factory=list)

    def is_good(self) -> bool:
        """True if the parse succeeded."""
        return self.error_type is ErrorType.SUCCESS

    def is_bad(self) -> bool:
        """True if the parse did not succeed."""
        return not self.is_good()

    def __str__(self) -> str:
        return self.error_type.value