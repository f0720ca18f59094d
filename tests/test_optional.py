import pytest

from gwparse.fixed_string import FixedString
from gwparse.optional import Optional
from gwparse.parse_rc import ErrorType
from gwparse.parsed_element import ParsedElement


@pytest.fixture
def option():
    opt = Optional("Opt")
    opt.add_child(FixedString("--x"))
    return opt


@pytest.mark.parametrize(
    "text, error, length, completions, matched",
    [
        ("--x rest", ErrorType.SUCCESS, 3, [], "--x"),
        ("--", ErrorType.MISSING_TEXT, 2, ["--x", ""], ""),
        ("", ErrorType.SUCCESS, 0, ["--x", ""], ""),
        ("zz", ErrorType.SUCCESS, 0, [], ""),
    ],
)
def test_parse_outcomes(option, text, error, length, completions, matched):
    tree = ParsedElement()
    rc = option.parse(text, tree)
    assert rc.error_type is error
    assert rc.len_parsed == length
    assert [c.matched_string() for c in rc.candidates] == completions
    assert all(c.is_stopped() and c.grammar_element is option for c in rc.candidates)
    assert all(c.parent is tree.parent for c in rc.candidates)
    assert tree.matched_string() == matched
    assert len(tree.children) == (1 if matched else 0)


def test_candidate_wraps_child(option):
    rc = option.parse("--", ParsedElement())
    assert rc.candidates[0].children[0].grammar_element is option.children[0]


@pytest.mark.parametrize("nested", [False, True])
def test_missing_child_fails_retrieval(nested):
    outer = Optional()
    if nested:
        outer.add_child(Optional())
    rc = outer.parse("abc", ParsedElement())
    assert rc.error_type is ErrorType.RETRIEVING_GRAMMAR_FAILED
    assert rc.error_message == "Optional Element has no child. Grammar incomplete."


def test_str_wraps_child(option):
    assert (str(option), str(Optional())) == ("[--x]", "[]")