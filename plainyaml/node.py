"""Tree nodes of a YAML document and their serialisation."""

from __future__ import annotations

import dataclasses
import enum
import logging
from dataclasses import dataclass
from typing import Iterator

_log = logging.getLogger(__name__)

_WHITESPACE = " \t\n\r\f\v"


class YamlError(RuntimeError):
    """Raised when a node is used in a way its type does not allow."""


class NodeType(enum.IntEnum):
    UNDEFINED = 0
    EMPTY = 1
    ARRAY = 2
    MAP = 3
    VALUE = 4


class QuoteStyle(enum.Enum):
    NONE = "none"
    DOUBLE = "double"
    SINGLE = "single"

    def wrap(self, text: str) -> str:
        """Surround ``text`` with the quote characters of this style."""
        if self is QuoteStyle.DOUBLE:
            return f'"{text}"'
        if self is QuoteStyle.SINGLE:
            return f"'{text}'"
        return text


@dataclass
class PlaceInFile:
    """Where a node came from: file name, zero-based line number and line text."""

    filename: str = ""
    line_number: int = 0
    line: str = ""

    def for_log(self) -> str:
        return f"({self.filename}:{self.line_number + 1}): {self.line}"


def _strip_trailing_newline(text: str) -> str:
    return text[:-1] if text.endswith("\n") else text


_TYPE_NAMES = {
    NodeType.UNDEFINED: "undefined",
    NodeType.ARRAY: "array",
    NodeType.MAP: "map",
    NodeType.VALUE: "value",
}


class YamlNode:
    """A node of the YAML tree: a map, an array, a scalar value or an empty line."""

    def __init__(
        self,
        parent: YamlNode | None,
        place: PlaceInFile | None = None,
        node_type: NodeType = NodeType.UNDEFINED,
    ) -> None:
        self.parent = parent
        self.place = dataclasses.replace(place) if place is not None else PlaceInFile()
        self.node_type = node_type
        self.comment = ""
        self._children: list[YamlNode] = []
        self._value = ""
        self.value_quotes = QuoteStyle.NONE
        self._name = ""
        self.name_quotes = QuoteStyle.NONE
        if parent is not None and parent.parent is not None:
            self.last_indent = 2
        else:
            self.last_indent = 0
        self.last_indent_str = " " * self.last_indent
        self.node_indent = 0

    # ----- identity -------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, name: str, quotes: QuoteStyle = QuoteStyle.NONE) -> None:
        self._name = name
        self.name_quotes = quotes

    @property
    def line_number(self) -> int:
        return self.place.line_number

    @line_number.setter
    def line_number(self, number: int) -> None:
        self.place.line_number = number

    @property
    def type_name(self) -> str:
        return _TYPE_NAMES.get(self.node_type, "unknown")

    def for_log(self) -> str:
        return self.place.for_log()

    @property
    def children(self) -> Iterator[YamlNode]:
        return iter(self._children)

    def has_objects(self) -> bool:
        return bool(self._children)

    # ----- type -----------------------------------------------------

    def is_empty(self) -> bool:
        return self.node_type is NodeType.EMPTY

    def is_undefined(self) -> bool:
        return self.node_type is NodeType.UNDEFINED

    def is_map(self) -> bool:
        return self.node_type is NodeType.MAP

    def is_array(self) -> bool:
        return self.node_type is NodeType.ARRAY

    def is_value(self) -> bool:
        return self.node_type is NodeType.VALUE

    def _define(self, node_type: NodeType) -> None:
        if self.node_type is not NodeType.UNDEFINED:
            raise YamlError(f"YamlNode: Element already defined as '{self.type_name}'")
        self.node_type = node_type

    def make_empty(self) -> None:
        self._define(NodeType.EMPTY)

    def make_array(self) -> None:
        self._define(NodeType.ARRAY)

    def make_map(self) -> None:
        self._define(NodeType.MAP)

    def make_value(self) -> None:
        self._define(NodeType.VALUE)

    # ----- map ------------------------------------------------------

    def _require_map(self, operation: str) -> None:
        if self.node_type is not NodeType.MAP:
            raise YamlError(f"YamlNode: {operation}: Element must be map for {self.for_log()}")

    def _require_array(self, operation: str) -> None:
        if self.node_type is not NodeType.ARRAY:
            raise YamlError(f"YamlNode: {operation}: Element must be array for {self.for_log()}")

    def has_element(self, name: str) -> bool:
        self._require_map(f"has_element('{name}')")
        return any(child.name == name for child in self._children)

    def get_element(self, name: str) -> YamlNode:
        self._require_map("get_element")
        for child in self._children:
            if child.name == name:
                return child
        raise YamlError(f"YamlNode: Element '{name}' not found for {self.for_log()}")

    def set_element(self, name: str, node: YamlNode) -> bool:
        if self.node_type is NodeType.UNDEFINED:
            self.node_type = NodeType.MAP
        if self.node_type is not NodeType.MAP:
            raise YamlError(f"YamlNode: set_element, Element must be 'map' for {node.for_log()}")
        if self.has_element(name):
            raise YamlError(
                f"YamlNode: set_element: Current map '{self.name}' "
                f"({self.place.filename}:{self.place.line_number}) "
                f"already has element with this name: '{name}'"
            )
        self._children.append(node)
        return True

    def remove_element(self, name: str) -> bool:
        self._require_map("remove_element")
        for position, child in enumerate(self._children):
            if child.name == name:
                del self._children[position]
                return True
        return False

    def keys(self) -> list[str]:
        self._require_map("keys")
        return [child.name for child in self._children if not child.is_empty()]

    def set_element_value(
        self,
        name: str,
        value: str,
        name_quotes: QuoteStyle = QuoteStyle.NONE,
        value_quotes: QuoteStyle = QuoteStyle.NONE,
    ) -> bool:
        if self.node_type is NodeType.UNDEFINED:
            self.node_type = NodeType.MAP
        if self.node_type is not NodeType.MAP:
            raise YamlError(f"YamlNode: set_element_value, Element must be 'map' for {self.for_log()}")
        if self.has_element(name):
            self.get_element(name).set_value(value, value_quotes)
        else:
            child = YamlNode(self, PlaceInFile(), NodeType.VALUE)
            child.set_name(name, name_quotes)
            child.set_value(value, value_quotes)
            self.set_element(name, child)
        return True

    def create_element_map(self, name: str, name_quotes: QuoteStyle = QuoteStyle.NONE) -> bool:
        self._require_map("create_element_map")
        if self.has_element(name):
            return False
        child = YamlNode(self, PlaceInFile(), NodeType.MAP)
        child.set_name(name, name_quotes)
        self.set_element(name, child)
        return True

    def create_element_array(self, name: str, name_quotes: QuoteStyle = QuoteStyle.NONE) -> bool:
        self._require_map("create_element_array")
        if self.has_element(name):
            return False
        child = YamlNode(self, PlaceInFile(), NodeType.ARRAY)
        child.set_name(name, name_quotes)
        self.set_element(name, child)
        return True

    # ----- array ----------------------------------------------------

    def append_map(self) -> YamlNode:
        """Append a new map item to this array and return it."""
        self._require_array("append_map")
        child = YamlNode(self, PlaceInFile(), NodeType.MAP)
        self.append_element(child)
        return child

    def length(self) -> int:
        self._require_array("length")
        return sum(1 for child in self._children if not child.is_empty())

    def _find_item(self, index: int) -> YamlNode:
        items = [child for child in self._children if not child.is_empty()]
        if 0 <= index < len(items):
            return items[index]
        raise YamlError(
            f"YamlNode: element_at({index}), Out of range in array for '{self.place.line}'"
        )

    def element_at(self, index: int) -> YamlNode:
        self._require_array("element_at")
        return self._find_item(index)

    def append_element(self, node: YamlNode) -> bool:
        if node.is_empty():
            self._children.append(node)
            return True
        if self.node_type is not NodeType.ARRAY:
            raise YamlError(
                "YamlNode: append_element, trying to add node\n"
                f"    name='{node.name}'\n"
                f"    type={node.type_name}\n"
                f"    line={node.line_number})\n"
                f" To element (must be array)\n{self.for_log()}"
            )
        self._children.append(node)
        return True

    def append_element_value(self, value: str, quotes: QuoteStyle = QuoteStyle.NONE) -> bool:
        self._require_array("append_element_value")
        child = YamlNode(self, PlaceInFile(), NodeType.VALUE)
        child.set_value(value, quotes)
        return self.append_element(child)

    def remove_element_at(self, index: int) -> bool:
        self._require_array("remove_element_at")
        item = self._find_item(index)
        for position, child in enumerate(self._children):
            if child is item:
                del self._children[position]
                return True
        return False

    # ----- value ----------------------------------------------------

    @property
    def value(self) -> str:
        if self.node_type is not NodeType.VALUE:
            raise YamlError(f"YamlNode: value, Element must be value for {self.for_log()}")
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        self.set_value(value)

    def set_value(self, value: str, quotes: QuoteStyle = QuoteStyle.NONE) -> None:
        if self.node_type is not NodeType.VALUE:
            raise YamlError(f"YamlNode: set_value, Element must be value for {self.for_log()}")
        self.value_quotes = quotes
        self._value = value

    # ----- layout ---------------------------------------------------

    def set_node_indents(self, indents: list[int]) -> None:
        """Take the indent stack of the parser: the last step and the total."""
        self.last_indent = indents[-1]
        self.last_indent_str = " " * self.last_indent
        self.node_indent = sum(indents)

    def serialized_name(self) -> str:
        return self.name_quotes.wrap(self._name)

    def to_string(self, indent: str = "") -> str:
        """Render this node and everything below it as YAML text."""
        if self.is_value():
            text = self.value_quotes.wrap(self._value)
            if self.comment:
                if text:
                    text += " "
                text += "# " + self.comment
        elif self.is_undefined():
            text = ""
            for child in self._children:
                if child.is_empty():
                    text += "\n"
                else:
                    _log.warning("Undefined element contains something else")
            return text
        elif self.is_empty():
            if self.comment:
                return indent + self.last_indent_str + "# " + self.comment
            return ""
        elif self.is_array():
            text = self._array_to_string(indent)
        elif self.is_map():
            text = self._map_to_string(indent)
        else:
            _log.warning("Unknown node type %s", self.node_type)
            text = ""

        if self.parent is None:
            text = _strip_trailing_newline(text)
        return text

    def _array_to_string(self, indent: str) -> str:
        text = ""
        for child in self._children:
            if child.is_empty():
                text += child.to_string(indent)
            elif child.is_map():
                inner = child.to_string(indent + child.last_indent_str).lstrip(_WHITESPACE)
                text += indent + child.last_indent_str + "- " + inner
            else:
                text += indent + child.last_indent_str + "- " + child.to_string()
            text += "\n"
        return _strip_trailing_newline(text)

    def _map_to_string(self, indent: str) -> str:
        if not self._children:
            return ""
        text = ""
        for child in self._children:
            prefix = indent + child.last_indent_str
            if child.is_empty():
                text += child.to_string(indent)
            elif child.is_undefined():
                text += prefix + child.serialized_name() + ":"
                if child.has_objects():
                    text = _strip_trailing_newline(text + "\n" + child.to_string())
            elif child.is_array() or child.is_map():
                text += prefix + child.serialized_name() + ":"
                if child.comment:
                    text += " # " + child.comment
                inner = child.to_string(prefix)
                if child.is_map() and child.keys():
                    text += "\n"
                if child.is_array() and child.length() > 0:
                    text += "\n"
                text += inner
            else:
                rendered = child.to_string()
                if rendered.strip(_WHITESPACE):
                    rendered = " " + rendered
                rendered = rendered.rstrip(_WHITESPACE)
                text += prefix + child.serialized_name() + ":" + rendered
            text += "\n"
        return _strip_trailing_newline(text)