"""Loading, saving and navigating a whole YAML document."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from plainyaml.cursor import Cursor
from plainyaml.line import ParsedLine, YamlParseError, parse_line
from plainyaml.node import NodeType, PlaceInFile, QuoteStyle, YamlNode

_log = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split ``text`` at newlines; a trailing newline adds no empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _new_root() -> YamlNode:
    return YamlNode(None, PlaceInFile(), NodeType.MAP)


class _Parser:
    """Builds a node tree from lines of YAML text, one line at a time."""

    def __init__(self, root: YamlNode, filename: str) -> None:
        self.root = root
        self.filename = filename
        self.current = root
        self.indents = [0]
        self.current_indent = 0
        self.place = PlaceInFile(filename=filename)
        self.line = ParsedLine()
        self.skipped: list[PlaceInFile] = []

    def run(self, lines: list[str]) -> None:
        for number, text in enumerate(lines):
            self.place = PlaceInFile(self.filename, number, text)
            self.line = parse_line(text, number)
            self._feed(number)

    def _feed(self, number: int) -> None:
        line = self.line
        diff = line.indent - self.current_indent
        if diff > 0:
            self.indents.append(diff)
            self.current_indent = line.indent

        if line.empty_line:
            self._add_blank_line()
            return

        if diff < 0 and line.indent == 0:
            diff = 0
            self.current_indent = 0
            self.current = self.root
            self.indents = [0]

        while diff < 0 and self.current_indent != line.indent:
            if self.current.parent is None or not self.indents:
                raise YamlParseError(f"Parent of current node is missing, line: {number}")
            self.current_indent -= self.indents.pop()
            self.current = self.current.parent
            if self.current_indent < line.indent:
                raise YamlParseError(
                    f"Wrong indent, expected '{line.indent}', but got "
                    f"'{self.current_indent}' in line: ({self.filename}:{number})"
                )
            if self.current_indent == line.indent:
                break

        has_value = not line.is_empty_value()
        if line.is_empty_name():
            if line.array_item:
                self._array_scalar()
            elif has_value:
                self._skip_line()
            else:
                self._comment_line()
        elif line.array_item:
            if has_value:
                self._array_map_item()
            else:
                self._skip_line()
        elif has_value:
            self._named_value()
        else:
            self._named_container()

    def _new_node(self, parent: YamlNode, node_type: NodeType) -> YamlNode:
        return YamlNode(parent, self.place, node_type)

    def _add_blank_line(self) -> None:
        current = self.current
        if current.is_array() or current.is_map() or current.is_undefined():
            target = current
        elif current.parent is not None and (current.parent.is_array() or current.parent.is_map()):
            target = current.parent
        else:
            raise YamlParseError("Empty element can be added only to map or to array")
        node = self._new_node(target, NodeType.EMPTY)
        node.set_node_indents(self.indents)
        target.append_element(node)

    def _array_scalar(self) -> None:
        if self.current.is_undefined():
            self.current.make_array()
        node = self._new_node(self.current, NodeType.VALUE)
        node.comment = self.line.comment
        node.set_value(self.line.value, self.line.value_quotes)
        node.set_node_indents(self.indents)
        self.current.append_element(node)

    def _comment_line(self) -> None:
        node = self._new_node(self.current, NodeType.EMPTY)
        node.comment = self.line.comment
        node.set_node_indents(self.indents)
        self.current.append_element(node)

    def _array_map_item(self) -> None:
        if self.current.is_undefined():
            self.current.make_array()
        item = self._new_node(self.current, NodeType.MAP)
        self.current.append_element(item)
        self.current = item
        item.set_node_indents(self.indents)

        node = self._new_node(item, NodeType.VALUE)
        node.comment = self.line.comment
        node.set_value(self.line.value, self.line.value_quotes)
        node.set_name(self.line.name, self.line.name_quotes)
        item.set_element(self.line.name, node)

        # the following lines of this item are indented as a map
        self.indents.append(2)
        self.current_indent += 2

    def _named_value(self) -> None:
        node = self._new_node(self.current, NodeType.VALUE)
        node.comment = self.line.comment
        node.set_value(self.line.value, self.line.value_quotes)
        node.set_name(self.line.name, self.line.name_quotes)
        node.set_node_indents(self.indents)
        self.current.set_element(self.line.name, node)

    def _named_container(self) -> None:
        line = self.line
        if line.indent == self.current.node_indent and self.current.parent is not None:
            self.current = self.current.parent
        node = self._new_node(self.current, NodeType.UNDEFINED)
        if line.value_quotes is not QuoteStyle.NONE:
            node.make_value()
            node.set_value(line.value, line.value_quotes)
        node.set_name(line.name, line.name_quotes)
        node.comment = line.comment
        node.set_node_indents(self.indents)
        self.current.set_element(line.name, node)
        if node.is_undefined():
            self.current = node

    def _skip_line(self) -> None:
        """Record a line the parser cannot place in the tree and warn about it."""
        self.skipped.append(self.place)
        _log.warning(
            "unknown line %d in %r (indent %d): %r",
            self.place.line_number,
            self.filename,
            self.current_indent,
            self.place.line,
        )


class YamlDocument:
    """A YAML document: a root map that can be loaded, edited and saved.

    ``skipped_lines`` holds the places of lines the last load could not use.
    """

    def __init__(self) -> None:
        self.root = _new_root()
        self.skipped_lines: list[PlaceInFile] = []

    def clear(self) -> None:
        """Drop all content, leaving an empty root map."""
        self.root = _new_root()
        self.skipped_lines = []

    def load_file(self, path: str | os.PathLike[str]) -> None:
        """Replace the content with the YAML text of the file at ``path``."""
        text = Path(path).read_text(encoding="utf-8")
        self.load_string(os.fspath(path), text)

    def save_file(self, path: str | os.PathLike[str]) -> None:
        """Write the document to the file at ``path``."""
        Path(path).write_text(self.dump(), encoding="utf-8")

    def load_string(self, name: str, text: str) -> None:
        """Replace the content with ``text``; ``name`` is used in messages.

        Raises :class:`YamlParseError` or :class:`YamlError` on bad input.
        """
        root = _new_root()
        root.place = PlaceInFile(filename=name)
        parser = _Parser(root, name)
        parser.run(split_lines(text))
        self.root = root
        self.skipped_lines = parser.skipped

    def dump(self) -> str:
        """Render the document as YAML text ending with a newline."""
        return self.root.to_string() + "\n"

    def cursor(self) -> Cursor:
        return Cursor(self.root)

    def __getitem__(self, key: int | str) -> Cursor:
        return self.cursor()[key]