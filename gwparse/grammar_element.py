"""Base class for the nodes of a grammar graph."""

from __future__ import annotations

import abc
import itertools

from gwparse.parse_rc import ErrorType, ParseRc
from gwparse.parsed_element import ParsedElement

_instance_ids = itertools.count()


class GrammarElement(abc.ABC):
    """A node of a grammar graph that can parse text into a ParsedElement."""

    def __init__(self, type_name: str, element_name: str = "") -> None:
        self.parent: GrammarElement = self
        self.children: list[GrammarElement] = []
        self.tag = ""
        self.type_name = type_name
        self.element_name = element_name
        self.instance_id = next(_instance_ids)
        self.document = ""

    @abc.abstractmethod
    def parse(self, text, out, candidate_depth=1, start_child=0):
        """Parse text into out and return a ParseRc with completion candidates.

        candidate_depth limits how often the parse may fork while collecting
        candidates; start_child selects the first child to parse.
        """

    def add_child(self, child: GrammarElement) -> GrammarElement:
        """Append a child and return this element."""
        child.parent = self
        self.children.append(child)
        return self

    def dot_node(self) -> str:
        """The node and its outgoing edges in Graphviz dot syntax."""
        edges = "".join(
            f" n{self.instance_id} -> n{child.instance_id};\n" for child in self.children
        )
        return self._dot_label() + edges

    def __str__(self) -> str:
        inner = "".join(f"{child}, " for child in self.children)
        return f"{self.type_name}({self.element_name}:{self.instance_id}){{{inner}}}"

    def _dot_label(self, detail: str = "", *, document: bool = True) -> str:
        """A dot node line whose label ends with detail and, optionally, the doc."""
        label = f"{self.instance_id} {self.type_name} {self.element_name} {self.tag}{detail}"
        if document:
            label += f' doc: \\"{self.document}\\"'
        return f'n{self.instance_id}[label="{label}"];\n'

    def _matched(self, out: ParsedElement, matched: str) -> ParseRc:
        """A successful outcome that consumed exactly matched."""
        out.raw_text = matched
        rc = ParseRc()
        rc.len_parsed_successfully = rc.len_parsed = len(matched)
        return rc

    def _completion(self, out: ParsedElement, consumed: int, completion: str) -> ParseRc:
        """Missing text, offering completion as the single candidate."""
        rc = ParseRc(error_type=ErrorType.MISSING_TEXT)
        rc.len_parsed = consumed
        candidate = ParsedElement(parent=out, grammar_element=self)
        candidate.raw_text = completion
        rc.candidates.append(candidate)
        return rc

    def _incomplete_grammar(self) -> ParseRc:
        """The outcome for an element that needs children but has none."""
        rc = ParseRc(error_type=ErrorType.RETRIEVING_GRAMMAR_FAILED)
        rc.error_message = f"{self.type_name} Element has no child. Grammar incomplete."
        return rc