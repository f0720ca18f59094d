from gwparse.concatenation import Concatenation
from gwparse.fixed_string import FixedString
from gwparse.parse_rc import ErrorType
from gwparse.parsed_element import ParsedElement
from gwparse.repetition import Repetition


def _rep(text):
    rep = Repetition()
    rep.add_child(FixedString(text))
    return rep


def test_parses_all_repetitions_to_end():
    rep = _rep("a")
    out = ParsedElement()
    rc = rep.parse("aaa", out)
    assert rc.is_good()
    assert rc.len_parsed_successfully == 3
    assert out.matched_string() == "aaa"
    assert [c.matched_string() for c in rc.candidates] == ["aaaa"]


def test_stops_at_unexpected_text():
    rep = _rep("a")
    out = ParsedElement()
    rc = rep.parse("aab", out)
    assert rc.error_type is ErrorType.SUCCESS
    assert rc.len_parsed_successfully == 2
    assert rc.candidates == []
    assert out.matched_string() == "aa"


def test_empty_text_offers_child_as_candidate():
    rep = _rep("a")
    rc = rep.parse("", ParsedElement())
    assert rc.is_good()
    assert [c.matched_string() for c in rc.candidates] == ["a"]
    assert rc.candidates[0].is_stopped()


def test_partial_repetition_is_missing_text():
    rep = _rep("ab")
    out = ParsedElement()
    rc = rep.parse("aba", out)
    assert rc.error_type is ErrorType.MISSING_TEXT
    assert rc.len_parsed_successfully == 2
    assert rc.len_parsed == 3
    assert [c.matched_string() for c in rc.candidates] == ["abab"]
    assert rc.candidates[0].grammar_element is rep


def test_without_children_succeeds_empty():
    rep = Repetition()
    out = ParsedElement()
    rc = rep.parse("xyz", out)
    assert rc.is_good()
    assert rc.len_parsed == 0
    assert out.children == []


def test_grammar_failure_is_propagated():
    rep = Repetition()
    rep.add_child(Concatenation())
    rc = rep.parse("x", ParsedElement())
    assert rc.error_type is ErrorType.RETRIEVING_GRAMMAR_FAILED
    assert rc.error_message == "Concatenation Element has no child. Grammar incomplete."


def test_str():
    assert str(_rep("a")) == "(a)*"