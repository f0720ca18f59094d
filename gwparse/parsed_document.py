"""Positions of documented nodes within a parse tree."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterable, Optional

from gwparse.parsed_element import ParsedElement


@dataclass
class Coordinate:
    """Position of a node: tree depth, index in its subtree, steps from root."""

    depth: int = 0
    index: int = 0
    step: int = 0

    def __str__(self) -> str:
        return f"({self.depth}, {self.index}, {self.step})"


class ParsedDocument:
    """A documented parse-tree node together with its path from the root."""

    def __init__(self, parsed_element: Optional[ParsedElement] = None) -> None:
        self.parsed_element = parsed_element
        self._path: list[Coordinate] = []
        self.max_step = 0

    @property
    def path(self) -> list[Coordinate]:
        """A copy of the path from the root to the node."""
        return [dataclasses.replace(node) for node in self._path]

    def add_node_to_path(self, node: Coordinate) -> None:
        """Append a coordinate to the path."""
        self._path.append(dataclasses.replace(node))

    def update_path(self, path: Iterable[Coordinate]) -> None:
        """Replace the path with a copy of the given one."""
        self._path = [dataclasses.replace(node) for node in path]

    def calculate_step_from_root(self) -> None:
        """Accumulate the rightward steps from the root and track their maximum."""
        for i, node in enumerate(self._path):
            if i > 0:
                node.step += sum(prev.index for prev in self._path[: i + 1])
            self.max_step = max(self.max_step, node.step)

    def path_string(self) -> str:
        """The path and the node's documentation as one line."""
        nodes = "".join(f"{node}->" for node in self._path)
        document = ""
        if self.parsed_element is not None and self.parsed_element.grammar_element:
            document = self.parsed_element.grammar_element.document
        return f"(depth, index, step): {nodes}{document}"

    @staticmethod
    def option_string(text: str) -> str:
        """The value after the first ':' of an option dump, unquoted and trimmed."""
        _, colon, value = text.partition(":")
        if not colon:
            return ""
        return value.replace('"', "").replace("\n", " ").strip("\r\n\t ")