import pytest

from gwparse.fixed_string import FixedString
from gwparse.grammar_injector import GrammarInjector, GrammarRetrievalError
from gwparse.parse_rc import ErrorType
from gwparse.parsed_element import ParsedElement


class _Injector(GrammarInjector):
    def __init__(self, result=None, error=None):
        super().__init__("Test", "inj")
        self.result = result
        self.error = error
        self.calls = []

    def get_grammar(self, parse_tree):
        self.calls.append(parse_tree)
        if self.error is not None:
            raise GrammarRetrievalError(self.error)
        return self.result


def test_injects_and_parses_through_child():
    fixed = FixedString("hello")
    injector = _Injector(result=fixed)
    out = ParsedElement()
    rc = injector.parse("hello", out)
    assert rc.is_good()
    assert out.matched_string() == "hello"
    assert out.grammar_element is injector
    assert out.children[0].grammar_element is fixed


def test_grammar_fetched_only_once():
    injector = _Injector(result=FixedString("x"))
    injector.parse("x", ParsedElement())
    injector.parse("x", ParsedElement())
    assert len(injector.calls) == 1


def test_receives_tree_root():
    injector = _Injector(result=FixedString("x"))
    root = ParsedElement()
    inner = ParsedElement(parent=root)
    injector.parse("x", inner)
    assert injector.calls == [root]


def test_retrieval_error_sets_message():
    injector = _Injector(error="no server")
    rc = injector.parse("x", ParsedElement())
    assert rc.error_type is ErrorType.RETRIEVING_GRAMMAR_FAILED
    assert rc.error_message == "no server"
    assert injector.children == []


def test_missing_grammar_is_unexpected_text():
    injector = _Injector(result=None)
    rc = injector.parse("x", ParsedElement())
    assert rc.error_type is ErrorType.UNEXPECTED_TEXT


def test_type_name_prefixed():
    injector = _Injector(result=FixedString("x"))
    out = ParsedElement()
    injector.parse("x", out)
    assert out.grammar_element.type_name == "GrammarInjector::Test"


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        GrammarInjector("Test")