import pytest

from gwparse.parse_rc import ErrorType, ParseRc


@pytest.mark.parametrize(
    "error_type, name, good",
    [
        (ErrorType.SUCCESS, "success", True),
        (ErrorType.MISSING_TEXT, "missingText", False),
        (ErrorType.UNEXPECTED_TEXT, "unexpectedText", False),
        (ErrorType.RETRIEVING_GRAMMAR_FAILED, "retrievingGrammarFailed", False),
    ],
)
def test_state_and_name(error_type, name, good):
    rc = ParseRc(error_type=error_type)
    assert rc.is_good() == good
    assert rc.is_bad() == (not good)
    assert str(rc) == name


def test_defaults():
    rc = ParseRc()
    assert rc.error_type is ErrorType.SUCCESS
    assert (rc.len_parsed, rc.len_parsed_successfully, rc.error_message) == (0, 0, "")


def test_candidate_lists_are_independent():
    first, second = ParseRc(), ParseRc()
    first.candidates.append("x")
    assert (first.candidates, second.candidates) == (["x"], [])