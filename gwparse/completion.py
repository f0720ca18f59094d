"""Shell completion output for bash and fish from parse candidates."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from gwparse.parsed_element import ParsedElement

_FISH_DELIMITER = " "


@dataclass
class Suggestion:
    """A completion text with its optional documentation."""

    completion: str
    documentation: str = ""


def _rfind_any(text: str, chars: str, pos: int) -> int:
    """Index of the last character from chars at or before pos, or -1."""
    last = min(pos, len(text) - 1)
    return next((i for i in range(last, -1, -1) if text[i] in chars), -1)


def _char_at(text: str, index: int) -> str:
    """The character at index, or NUL past the end of the text."""
    return text[index] if 0 <= index < len(text) else "\0"


def _candidate_documentation(candidate: ParsedElement, parse_tree: ParsedElement) -> str:
    """The candidate's documentation unless it adds nothing to the parse tree's."""
    doc = candidate.short_document()
    return "" if doc == parse_tree.short_document() else doc


def next_fish_suggestion(candidate: str, user_input: str) -> tuple[str, bool]:
    """The next word to complete for fish and whether the candidate was cut short.

    Only text after the last space of the user input counts, and only up to
    the first space of what remains.
    """
    start = user_input.rfind(_FISH_DELIMITER)
    if start < 0:
        start = 0
    suggestion = candidate[start:]

    if suggestion != _FISH_DELIMITER:
        if not suggestion.strip(_FISH_DELIMITER):
            # only spaces (or nothing): collapse to at most one space
            first = suggestion.find(_FISH_DELIMITER)
            suggestion = suggestion[: first + 1]
        else:
            suggestion = suggestion.lstrip(_FISH_DELIMITER)

    trimmed = False
    found = suggestion.find(_FISH_DELIMITER)
    if found >= 0:
        if found != len(suggestion) - 1:
            trimmed = True
        suggestion = suggestion[:found]
    return suggestion, trimmed


def fish_completions(
    candidates: Iterable[ParsedElement],
    parse_tree: ParsedElement,
    args: str,
    debug: bool = False,
) -> list[str]:
    """The lines fish expects on standard output for these candidates."""
    lines: list[str] = []
    seen: list[str] = []
    n = len(args)
    for candidate in candidates:
        candidate_str = candidate.matched_string_raw()
        if debug:
            lines.append("------------------------------------------------")
            lines.append(f"candiate string: {candidate_str}")
            lines.append("candiate's debug string: ")
            lines.extend(candidate.debug_string().splitlines())
            lines.append("")
            lines.append("------------------------------------------------")

        doc = _candidate_documentation(candidate, parse_tree)

        if debug:
            lines.append(f"suggestionDoc: {doc}")
            lines.append(f"pre: '{candidate_str}'")
            lines.append(f"candidateStr[n={n}] = '{_char_at(candidate_str, n)}'")

        suggestion, trimmed = next_fish_suggestion(candidate_str, args)
        if suggestion in seen:
            continue
        seen.append(suggestion)

        if debug:
            lines.append(f"nospace! cand='{candidate_str}', n={n}, start={n}")

        # A trimmed suggestion completes only a separator; it gets no documentation.
        if suggestion and not suggestion.endswith(":") and not trimmed and doc:
            suggestion = f"{suggestion}\t{doc}"

        if debug:
            lines.append(f"post: '{suggestion}'")
        lines.append(suggestion)
    return lines


def _bash_suggestion(candidate_str: str, n: int) -> str:
    """The completion text bash expects, starting at the last bash token."""
    if _char_at(candidate_str, n) not in " =,:":
        start = _rfind_any(candidate_str, " =:,", n) + 1
    else:
        pos = n - 1 if n > 0 else len(candidate_str) - 1
        start = _rfind_any(candidate_str, " =:", pos) + 1
    return candidate_str[start:].rstrip(" ")


def bash_completions(
    candidates: Sequence[ParsedElement],
    parse_tree: ParsedElement,
    args: str,
    debug: bool = False,
) -> list[str]:
    """The lines bash expects on standard output for these candidates."""
    lines: list[str] = []
    if debug:
        lines.extend(
            f"pre: '{candidate.matched_string_raw()}'" for candidate in candidates
        )

    n = len(args)
    suggestions: list[Suggestion] = []
    for candidate in candidates:
        candidate_str = candidate.matched_string_raw()
        if debug:
            lines.append(f"candidateStr[n={n}] = '{_char_at(candidate_str, n)}'")
        suggestions.append(
            Suggestion(
                _bash_suggestion(candidate_str, n),
                _candidate_documentation(candidate, parse_tree),
            )
        )

    documented = [s for s in suggestions if s.documentation]
    max_len = max((len(s.completion) for s in documented), default=0)
    max_doc_len = max((len(s.documentation) for s in documented), default=0)

    for suggestion in suggestions:
        output = suggestion.completion
        # bash completes a unique choice by itself, so documentation only
        # appears when there is a choice to make
        if suggestion.documentation and len(suggestions) > 1:
            padding = " " * (
                2
                + max_len
                - len(suggestion.completion)
                + max_doc_len
                - len(suggestion.documentation)
            )
            output += f"{padding}({suggestion.documentation})"
        lines.append(f"post: '{output}'" if debug else output)
    return lines


def print_fish_completions(
    candidates: Iterable[ParsedElement],
    parse_tree: ParsedElement,
    args: str,
    debug: bool = False,
) -> None:
    """Write fish completions to standard output."""
    if debug:
        print(f'Input string "{args}', file=sys.stderr)
    for line in fish_completions(candidates, parse_tree, args, debug):
        print(line)


def print_bash_completions(
    candidates: Sequence[ParsedElement],
    parse_tree: ParsedElement,
    args: str,
    debug: bool = False,
) -> None:
    """Write bash completions to standard output."""
    if debug:
        print(f'Input string "{args}"\nCandidates:\n', file=sys.stderr)
    for line in bash_completions(candidates, parse_tree, args, debug):
        print(line)