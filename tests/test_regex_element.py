import re

import pytest

from gwparse.parse_rc import ErrorType
from gwparse.parsed_element import ParsedElement
from gwparse.regex_element import RegEx


@pytest.mark.parametrize(
    "pattern, text, error, lengths, matched",
    [
        ("[0-9]+", "123abc", ErrorType.SUCCESS, (3, 3), "123"),
        ("[0-9]+", "abc123", ErrorType.UNEXPECTED_TEXT, (6, 0), ""),
        ("[0-9]+", "", ErrorType.MISSING_TEXT, (0, 0), ""),
        ("[0-9]*", "abc", ErrorType.SUCCESS, (0, 0), ""),
    ],
)
def test_parse_outcomes(pattern, text, error, lengths, matched):
    regex = RegEx(pattern)
    tree = ParsedElement()
    rc = regex.parse(text, tree)
    assert rc.error_type is error
    assert (rc.len_parsed, rc.len_parsed_successfully) == lengths
    assert tree.matched_string() == matched
    assert tree.grammar_element is regex
    assert rc.candidates == []


def test_invalid_pattern_raises():
    with pytest.raises(re.error):
        RegEx("[unclosed")


def test_str_variants():
    named, unnamed, empty = RegEx("[0-9]+", "Number"), RegEx("[0-9]+"), RegEx("")
    assert str(named) == f"/Number:{named.instance_id}/"
    assert str(unnamed) == "/[0-9]+/"
    assert str(empty) == f"RegEx(UnnamedRegex:{empty.instance_id})"


def test_dot_node_contains_pattern():
    word = RegEx("[a-z]+", "Word")
    node = word.dot_node()
    assert node.startswith(f'n{word.instance_id}[label="{word.instance_id} RegEx Word')
    assert node.endswith("'[a-z]+'\"];\n")