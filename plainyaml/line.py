"""Splitting one line of YAML text into indent, name, value and comment."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from plainyaml.node import QuoteStyle, YamlError

_WHITESPACE = " \t\n\r\f\v"
_NAME_PUNCTUATION = frozenset("-_")


class YamlParseError(YamlError):
    """Raised when a line of YAML text cannot be parsed."""


class _State(enum.Enum):
    NO = enum.auto()
    VALUE = enum.auto()
    COMMENT = enum.auto()
    DOUBLE = enum.auto()
    SINGLE = enum.auto()
    ESCAPING_DOUBLE = enum.auto()
    ESCAPING_SINGLE = enum.auto()


_OPEN_STRING_STATES = frozenset(
    {_State.DOUBLE, _State.SINGLE, _State.ESCAPING_DOUBLE, _State.ESCAPING_SINGLE}
)


@dataclass
class ParsedLine:
    """The parts of one YAML line."""

    line_number: int = -1
    prefix: str = ""
    array_item: bool = False
    comment: str = ""
    has_comment: bool = False
    name: str = ""
    name_quotes: QuoteStyle = QuoteStyle.NONE
    value: str = ""
    value_quotes: QuoteStyle = QuoteStyle.NONE
    empty_line: bool = False

    @property
    def indent(self) -> int:
        """Length of the leading whitespace."""
        return len(self.prefix)

    def is_empty_name(self) -> bool:
        return not self.name

    def is_empty_value(self) -> bool:
        return not self.value


def can_tag_name(value: str) -> bool:
    """Tell whether ``value`` may stand before a colon as a map key."""
    text = value.strip(_WHITESPACE)
    if not text:
        return False
    if text[0] == '"' and text[-1] == '"':
        return True
    if text[0] == "'" and text[-1] == "'":
        return True
    return all(
        c in _NAME_PUNCTUATION or ("0" <= c <= "9") or ("a" <= c <= "z") or ("A" <= c <= "Z")
        for c in text
    )


def _strip_quotes(value: str, quote: str) -> str:
    if value and value[0] != quote:
        return value
    result = []
    escaping = False
    for c in value[1:-1]:
        if escaping:
            if c == "n":
                result.append("\n")
            elif c == "r":
                result.append("\r")
            else:
                result.append(c)
        elif c == "\\":
            escaping = True
        else:
            result.append(c)
    return "".join(result)


def unquote(value: str) -> str:
    """Drop the surrounding quotes of ``value`` and decode its escapes.

    A value that does not start with a quote is returned unchanged.
    """
    if value and value[0] == "'":
        return _strip_quotes(value, "'")
    return _strip_quotes(value, '"')


def _split_quotes(text: str) -> tuple[str, QuoteStyle]:
    quotes = QuoteStyle.NONE
    if text and text[0] == '"':
        quotes = QuoteStyle.DOUBLE
        text = _strip_quotes(text, '"')
    if text and text[0] == "'":
        quotes = QuoteStyle.SINGLE
        text = _strip_quotes(text, "'")
    return text, quotes


def parse_line(line: str, line_number: int = -1) -> ParsedLine:
    """Parse one line of YAML text.

    Raises :class:`YamlParseError` for an unterminated string and for a
    value without a name outside an array item.
    """
    parsed = ParsedLine(line_number=line_number)
    if not line.strip(_WHITESPACE):
        parsed.empty_line = True
        return parsed

    prefix = ""
    comment = ""
    name = ""
    value = ""
    state = _State.NO
    for c in line:
        if c in " \t" and state is _State.NO:
            prefix += c
        elif c == "#" and state in (_State.NO, _State.VALUE):
            state = _State.COMMENT
            parsed.has_comment = True
        elif state is _State.COMMENT:
            if c != "\r":
                comment += c
        elif c == "-" and state is _State.NO:
            parsed.array_item = True
            state = _State.VALUE
        elif state is _State.NO:
            value += c
            if c == '"':
                state = _State.DOUBLE
            elif c == "'":
                state = _State.SINGLE
            else:
                state = _State.VALUE
        elif c == '"' and state is _State.VALUE:
            state = _State.DOUBLE
            value += c
        elif c == "'" and state is _State.VALUE:
            state = _State.SINGLE
            value += c
        elif c == "\\" and state is _State.DOUBLE:
            state = _State.ESCAPING_DOUBLE
            value += c
        elif c == "\\" and state is _State.SINGLE:
            state = _State.ESCAPING_SINGLE
            value += c
        elif state is _State.ESCAPING_DOUBLE:
            state = _State.DOUBLE
            value += c
        elif state is _State.ESCAPING_SINGLE:
            state = _State.SINGLE
            value += c
        elif c == '"' and state is _State.DOUBLE:
            state = _State.VALUE
            value += c
        elif c == "'" and state is _State.SINGLE:
            state = _State.VALUE
            value += c
        elif c == ":" and state is _State.VALUE and not name and can_tag_name(value):
            name = value
            value = ""
        else:
            value += c

    if state in _OPEN_STRING_STATES:
        raise YamlParseError("Line has wrong format.")

    parsed.prefix = prefix
    parsed.name, parsed.name_quotes = _split_quotes(name.strip(_WHITESPACE))
    parsed.value, parsed.value_quotes = _split_quotes(value.strip(_WHITESPACE))
    parsed.comment = comment.strip(_WHITESPACE)

    if not parsed.array_item and not parsed.name and parsed.value:
        raise YamlParseError(f"Value of name can be empty only for array-item (line: {line})")
    return parsed