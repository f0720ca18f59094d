# gwparse

`gwparse` builds a grammar out of small elements and parses a command line
against it. When the input is incomplete, it returns the possible
continuations, which you can use for bash or fish tab completion.

## Building blocks

Each element is a subclass of `gwparse.grammar_element.GrammarElement`.
You combine elements with `add_child`.

- `gwparse.fixed_string.FixedString`: a literal keyword.
- `gwparse.regex_element.RegEx`: a regular expression that must match at the
  start of the remaining input.
- `gwparse.whitespace.WhiteSpace`: one or more spaces.
- `gwparse.escaped_string.EscapedString`: a run of text in which the listed
  characters may appear only when escaped. The escape character always counts
  as one of them.
- `gwparse.optional.Optional`, `gwparse.concatenation.Concatenation`,
  `gwparse.alternation.Alternation` and `gwparse.repetition.Repetition` are
  combinators that take other elements as children.
- `gwparse.grammar_injector.GrammarInjector` fetches its grammar lazily, the
  first time the element is parsed. To use it, subclass it and implement
  `get_grammar(parse_tree)`. That method returns the grammar element, or
  `None` if there is no grammar. If retrieval fails, it raises
  `GrammarRetrievalError` with a message.

Every element has a `document` attribute, which holds the text shown with
completions. `dot_node()` renders an element and its edges in Graphviz dot
syntax.

## Example

```python
from gwparse.concatenation import Concatenation
from gwparse.alternation import Alternation
from gwparse.fixed_string import FixedString
from gwparse.whitespace import WhiteSpace
from gwparse.parsed_element import ParsedElement

root = Concatenation()
root.add_child(FixedString("call", "Command"))
root.add_child(WhiteSpace())
choice = Alternation("Target")
choice.add_child(FixedString("alpha"))
choice.add_child(FixedString("beta"))
root.add_child(choice)

tree = ParsedElement()
rc = root.parse("call al", tree)
print(rc)                                            # missingText
print([c.matched_string() for c in rc.candidates])   # ['call alpha']
print(tree.find_first_child("Command"))              # call
```

`parse` returns a `gwparse.parse_rc.ParseRc`, which holds:

- an `ErrorType`;
- the consumed lengths;
- the completion candidates.

`is_good()` reports whether the parse succeeded.

The parse tree is built from `ParsedElement` nodes. It has these search
helpers:

- `find_first_child`
- `find_first_subtree`
- `find_all_subtrees`

It also has these accessors:

- `matched_string`
- `matched_string_raw`
- `short_document`
- `debug_string`

`gwparse.parsed_document` has `Coordinate` and `ParsedDocument`. They record
where documented nodes sit in a parse tree. `ParsedDocument.option_string`
cleans up the value of an option dump.

## Shell completion

`gwparse.completion` turns parse candidates into completion lines:

- `bash_completions` and `fish_completions` return the lines.
- `print_bash_completions` and `print_fish_completions` write them to standard
  output.
- `next_fish_suggestion` gives the next word for fish, and tells whether that
  word was cut short.

A suggestion carries its element's documentation when the element has one.
For bash, the documentation is shown only when there is more than one choice.

## What it does not do

`gwparse` is a library only. It has no command-line program of its own. It has
no ready-made helper for separated lists. It has no container that owns a
whole grammar and renders it as one dot graph; you call `dot_node()` on each
element yourself.