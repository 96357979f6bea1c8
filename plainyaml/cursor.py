"""A forgiving view over a YAML tree for reading and updating values."""

from __future__ import annotations

import re

from plainyaml.node import YamlError, YamlNode

_INT_PATTERN = re.compile(r"0|-?[1-9][0-9]*")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_TRUE_WORDS = frozenset({"yes", "true"})
_FALSE_WORDS = frozenset({"no", "false"})


class Cursor:
    """Points at a node of a YAML tree, or at nothing.

    Looking up a missing key or an index out of range gives a null cursor
    instead of raising, so lookups can be chained freely.
    """

    def __init__(self, node: YamlNode | None = None) -> None:
        self._node = node

    @property
    def node(self) -> YamlNode | None:
        """The node pointed at, or None."""
        return self._node

    # ----- kind -----------------------------------------------------

    def is_null(self) -> bool:
        return self._node is None

    def is_undefined(self) -> bool:
        return self._node is not None and self._node.is_undefined()

    def is_value(self) -> bool:
        return self._node is not None and self._node.is_value()

    def is_array(self) -> bool:
        return self._node is not None and self._node.is_array()

    def is_map(self) -> bool:
        return self._node is not None and self._node.is_map()

    # ----- array ----------------------------------------------------

    def size(self) -> int:
        """Number of items of an array, or -1 when this is not an array."""
        if self.is_array():
            return self._node.length()
        return -1

    # ----- map ------------------------------------------------------

    def keys(self) -> list[str]:
        if self.is_map():
            return self._node.keys()
        return []

    def has_key(self, key: str) -> bool:
        return self.is_map() and self._node.has_element(key)

    # ----- comment --------------------------------------------------

    @property
    def comment(self) -> str:
        return self._node.comment if self._node is not None else ""

    def set_comment(self, comment: str) -> Cursor:
        if self._node is not None:
            self._node.comment = comment
        return self

    # ----- value ----------------------------------------------------

    def val_str(self) -> str:
        """The scalar text, or an empty string for a null cursor."""
        if self._node is None:
            return ""
        return self._node.value

    def val_int(self) -> int:
        """The scalar as an integer; 0 for a null cursor.

        Raises :class:`YamlError` unless the text is a plain 32-bit integer.
        """
        if self._node is None:
            return 0
        text = self._node.value.lower()
        if _INT_PATTERN.fullmatch(text):
            number = int(text)
            if _INT_MIN <= number <= _INT_MAX:
                return number
        raise YamlError(
            f"Cursor: val_int, Element must be int but have a string {self._node.for_log()}"
        )

    def val_bool(self) -> bool:
        """The scalar as a boolean; False for a null cursor.

        Accepts yes/no/true/false in any letter case.
        """
        if self._node is None:
            return False
        text = self._node.value.lower()
        if text in _TRUE_WORDS:
            return True
        if text in _FALSE_WORDS:
            return False
        raise YamlError(
            "Cursor: val_bool, Element must be bool expected with ignore case like "
            f"'yes', 'no', 'true', 'false' for {self._node.for_log()}"
        )

    def set_val(self, value: str | int | bool) -> Cursor:
        """Store a string, integer or boolean in the scalar node."""
        if self._node is not None:
            if isinstance(value, bool):
                text = "yes" if value else "no"
            elif isinstance(value, int):
                text = str(value)
            else:
                text = value
            self._node.set_value(text)
        return self

    # ----- navigation -----------------------------------------------

    def __getitem__(self, key: int | str) -> Cursor:
        node = self._node
        if node is None:
            return Cursor()
        if isinstance(key, str):
            if node.is_map() and node.has_element(key):
                return Cursor(node.get_element(key))
            return Cursor()
        if node.is_array() and 0 <= key < node.length():
            return Cursor(node.element_at(key))
        return Cursor()