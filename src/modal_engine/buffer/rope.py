"""AVL-balanced rope with cached line metrics.

Leaves hold short chunks of text; every node caches the number of characters
and line breaks below it, so converting between absolute offsets and line
indices only walks one root-to-leaf path.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

LEAF_CHUNK = 512
LINE_BREAK = "\n"


@dataclass(slots=True)
class RopeNode:
    left: Optional["RopeNode"] = None
    right: Optional["RopeNode"] = None
    text: str = ""
    length: int = 0
    newlines: int = 0
    height: int = 1

    @classmethod
    def leaf(cls, text: str) -> "RopeNode":
        return cls(text=text, length=len(text), newlines=text.count(LINE_BREAK))

    @classmethod
    def branch(cls, left: "RopeNode", right: "RopeNode") -> "RopeNode":
        return _refresh(cls(left=left, right=right))

    @property
    def is_leaf(self) -> bool:
        return self.left is None


def _height(node: Optional[RopeNode]) -> int:
    return node.height if node is not None else 0


def _refresh(node: RopeNode) -> RopeNode:
    left, right = node.left, node.right
    assert left is not None and right is not None
    node.length = left.length + right.length
    node.newlines = left.newlines + right.newlines
    node.height = 1 + max(left.height, right.height)
    return node


def _skew(node: RopeNode) -> int:
    if node.is_leaf:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: RopeNode) -> RopeNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = _refresh(node)
    return _refresh(pivot)


def _rotate_left(node: RopeNode) -> RopeNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = _refresh(node)
    return _refresh(pivot)


def _balance(node: RopeNode) -> RopeNode:
    _refresh(node)
    skew = _skew(node)
    if skew > 1:
        if _skew(node.left) < 0:  # type: ignore[arg-type]
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    if skew < -1:
        if _skew(node.right) > 0:  # type: ignore[arg-type]
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    return node


def _join(left: Optional[RopeNode], right: Optional[RopeNode]) -> Optional[RopeNode]:
    if left is None:
        return right
    if right is None:
        return left
    if left.is_leaf and right.is_leaf and left.length + right.length <= LEAF_CHUNK:
        return RopeNode.leaf(left.text + right.text)
    if left.height > right.height + 1:
        left.right = _join(left.right, right)
        return _balance(left)
    if right.height > left.height + 1:
        right.left = _join(left, right.left)
        return _balance(right)
    return RopeNode.branch(left, right)


def _split(
    node: Optional[RopeNode], index: int
) -> Tuple[Optional[RopeNode], Optional[RopeNode]]:
    if node is None or index <= 0:
        return None, node
    if index >= node.length:
        return node, None
    if node.is_leaf:
        return RopeNode.leaf(node.text[:index]), RopeNode.leaf(node.text[index:])
    left, right = node.left, node.right
    assert left is not None and right is not None
    if index < left.length:
        head, tail = _split(left, index)
        return head, _join(tail, right)
    head, tail = _split(right, index - left.length)
    return _join(left, head), tail


def _build(text: str) -> Optional[RopeNode]:
    if not text:
        return None
    if len(text) <= LEAF_CHUNK:
        return RopeNode.leaf(text)
    middle = len(text) // 2
    return _join(_build(text[:middle]), _build(text[middle:]))


class Rope:
    """Editable character sequence with logarithmic line/offset lookups."""

    __slots__ = ("_root",)

    def __init__(self, text: str = "") -> None:
        self._root = _build(text)

    def __len__(self) -> int:
        return self.len_chars()

    def __str__(self) -> str:
        return "".join(self.chunks())

    def __repr__(self) -> str:
        return f"Rope({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rope):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def len_chars(self) -> int:
        return self._root.length if self._root is not None else 0

    def len_lines(self) -> int:
        newlines = self._root.newlines if self._root is not None else 0
        return newlines + 1

    def chunks(self) -> Iterator[str]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            if node.is_leaf:
                yield node.text
            else:
                stack.append(node.right)  # type: ignore[arg-type]
                stack.append(node.left)  # type: ignore[arg-type]

    def char(self, index: int) -> str:
        if not 0 <= index < self.len_chars():
            raise IndexError(f"char index {index} out of range")
        node = self._root
        assert node is not None
        while not node.is_leaf:
            left = node.left
            assert left is not None
            if index < left.length:
                node = left
            else:
                index -= left.length
                node = node.right  # type: ignore[assignment]
        return node.text[index]

    def char_to_line(self, index: int) -> int:
        """Return the index of the line containing absolute offset ``index``."""

        if not 0 <= index <= self.len_chars():
            raise IndexError(f"char index {index} out of range")
        line = 0
        node = self._root
        while node is not None and not node.is_leaf:
            left = node.left
            assert left is not None
            if index < left.length:
                node = left
            else:
                line += left.newlines
                index -= left.length
                node = node.right
        if node is not None:
            line += node.text.count(LINE_BREAK, 0, index)
        return line

    def line_to_char(self, line: int) -> int:
        """Return the absolute offset where ``line`` starts.

        ``line == len_lines()`` is accepted and maps to the end of the text.
        """

        total = self.len_lines()
        if not 0 <= line <= total:
            raise IndexError(f"line index {line} out of range")
        if line == 0:
            return 0
        if line == total:
            return self.len_chars()
        node = self._root
        assert node is not None
        offset = 0
        remaining = line
        while not node.is_leaf:
            left = node.left
            assert left is not None
            if remaining <= left.newlines:
                node = left
            else:
                remaining -= left.newlines
                offset += left.length
                node = node.right  # type: ignore[assignment]
        position = -1
        for _ in range(remaining):
            position = node.text.index(LINE_BREAK, position + 1)
        return offset + position + 1

    def line_len(self, line: int) -> int:
        """Length of ``line`` including its terminator, if it has one."""

        if not 0 <= line < self.len_lines():
            raise IndexError(f"line index {line} out of range")
        return self.line_to_char(line + 1) - self.line_to_char(line)

    def line(self, line: int) -> str:
        if not 0 <= line < self.len_lines():
            raise IndexError(f"line index {line} out of range")
        return self.slice(self.line_to_char(line), self.line_to_char(line + 1))

    def lines(self, start: int = 0) -> Iterator[str]:
        for index in range(start, self.len_lines()):
            yield self.line(index)

    def slice(self, start: int, end: int) -> str:
        self._check_range(start, end)
        parts: list[str] = []
        _collect(self._root, start, end, parts)
        return "".join(parts)

    def insert(self, index: int, text: str) -> None:
        if not 0 <= index <= self.len_chars():
            raise IndexError(f"insert position {index} out of range")
        if not text:
            return
        head, tail = _split(self._root, index)
        self._root = _join(_join(head, _build(text)), tail)

    def remove(self, start: int, end: int) -> None:
        self._check_range(start, end)
        if start == end:
            return
        head, rest = _split(self._root, start)
        _, tail = _split(rest, end - start)
        self._root = _join(head, tail)

    def _check_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= self.len_chars():
            raise IndexError(f"range {start}..{end} out of bounds")


def _collect(node: Optional[RopeNode], start: int, end: int, out: list[str]) -> None:
    if node is None or start >= end:
        return
    if node.is_leaf:
        out.append(node.text[start:end])
        return
    left = node.left
    assert left is not None
    if start < left.length:
        _collect(left, start, min(end, left.length), out)
    if end > left.length:
        _collect(node.right, max(start - left.length, 0), end - left.length, out)


__all__ = ["Rope", "RopeNode", "LEAF_CHUNK", "LINE_BREAK"]
