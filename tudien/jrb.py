"""Red-black tree whose data lives in external nodes threaded into a sorted list.

Every key/value pair sits in an external (leaf) node.  Internal nodes only
steer searches and hold references to the largest external node of their left
subtree and the smallest of their right subtree.  External nodes are also
chained into a doubly linked list in key order, which makes in-order walks and
``next``/``prev`` steps constant time.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional, Tuple

Compare = Callable[[Any, Any], int]


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class JrbNode:
    """A node of a :class:`RedBlackTree`; external nodes carry ``key`` and ``value``."""

    __slots__ = (
        "key",
        "value",
        "red",
        "internal",
        "is_left",
        "is_root",
        "is_head",
        "flink",
        "blink",
        "parent",
        "lext",
        "rext",
    )

    def __init__(self, key: Any = None, value: Any = None) -> None:
        self.key = key
        self.value = value
        self.red = False
        self.internal = False
        self.is_left = False
        self.is_root = False
        self.is_head = False
        self.flink: Optional[JrbNode] = None
        self.blink: Optional[JrbNode] = None
        self.parent: Optional[JrbNode] = None
        self.lext: Optional[JrbNode] = None
        self.rext: Optional[JrbNode] = None

    def next(self) -> Optional["JrbNode"]:
        """Return the following node in key order, or None at the end."""
        n = self.flink
        if n is None or n.is_head:
            return None
        return n

    def prev(self) -> Optional["JrbNode"]:
        """Return the preceding node in key order, or None at the start."""
        n = self.blink
        if n is None or n.is_head:
            return None
        return n

    def __repr__(self) -> str:
        return f"JrbNode(key={self.key!r}, value={self.value!r})"


def _sibling(n: JrbNode) -> JrbNode:
    return n.parent.blink if n.is_left else n.parent.flink


def _lprev(n: JrbNode) -> JrbNode:
    if n.is_head:
        return n
    while not n.is_root:
        if not n.is_left:
            return n.parent
        n = n.parent
    return n.parent


def _rprev(n: JrbNode) -> JrbNode:
    if n.is_head:
        return n
    while not n.is_root:
        if n.is_left:
            return n.parent
        n = n.parent
    return n.parent


def _list_insert(item: JrbNode, lst: JrbNode) -> None:
    """Link ``item`` immediately before ``lst`` in the external list."""
    last = lst.blink
    lst.blink = item
    last.flink = item
    item.blink = last
    item.flink = lst


def _list_delete(item: JrbNode) -> None:
    item.flink.blink = item.blink
    item.blink.flink = item.flink


def _single_rotate(y: JrbNode, left: bool) -> None:
    was_root = y.is_root
    yp = y.parent
    was_left = y.is_left if not was_root else False

    if left:
        x = y.flink
        y.flink = x.blink
        y.flink.is_left = True
        y.flink.parent = y
        x.blink = y
        y.is_left = False
    else:
        x = y.blink
        y.blink = x.flink
        y.blink.is_left = False
        y.blink.parent = y
        x.flink = y
        y.is_left = True

    x.parent = yp
    y.parent = x
    if was_root:
        yp.parent = x
        y.is_root = False
        x.is_root = True
    elif was_left:
        yp.flink = x
        x.is_left = True
    else:
        yp.blink = x
        x.is_left = False


def _recolor(n: JrbNode) -> None:
    while True:
        if n.is_root:
            n.red = False
            return
        p = n.parent
        if not p.red:
            return
        if p.is_root:
            p.red = False
            return
        gp = p.parent
        s = _sibling(p)
        if s.red:
            p.red = False
            gp.red = True
            s.red = False
            n = gp
        else:
            break

    if n.is_left == p.is_left:
        _single_rotate(gp, n.is_left)
        p.red = False
        gp.red = True
    else:
        _single_rotate(p, n.is_left)
        _single_rotate(gp, n.is_left)
        n.red = False
        gp.red = True


def _new_internal(l: JrbNode, r: JrbNode, p: JrbNode, il: bool) -> None:
    node = JrbNode()
    node.internal = True
    node.red = True
    node.flink = l
    node.blink = r
    node.parent = p
    node.lext = l
    node.rext = r
    l.parent = node
    r.parent = node
    l.is_left = True
    r.is_left = False
    if p.is_head:
        p.parent = node
        node.is_root = True
    elif il:
        node.is_left = True
        p.flink = node
    else:
        node.is_left = False
        p.blink = node
    _recolor(node)


class RedBlackTree:
    """Ordered multimap backed by a leaf-oriented red-black tree.

    ``compare(a, b)`` returns a negative, zero or positive number; when it is
    None the keys' natural ordering is used.  Equal keys may be inserted more
    than once.
    """

    def __init__(self, compare: Optional[Compare] = None) -> None:
        self._compare: Compare = compare if compare is not None else _natural_compare
        self._head = self._make_head()
        self._size = 0

    @staticmethod
    def _make_head() -> JrbNode:
        head = JrbNode(key="")
        head.is_head = True
        head.flink = head
        head.blink = head
        head.parent = head
        return head

    def _find_gte(self, key: Any) -> Tuple[JrbNode, bool]:
        head = self._head
        if head.parent is head:
            return head, False
        cmp = self._compare(key, head.blink.key)
        if cmp == 0:
            return head.blink, True
        if cmp > 0:
            return head, False
        n = head.parent
        while True:
            if not n.internal:
                return n, False
            cmp = self._compare(key, n.lext.key)
            if cmp == 0:
                return n.lext, True
            n = n.flink if cmp < 0 else n.blink

    def find_gte(self, key: Any) -> Tuple[Optional[JrbNode], bool]:
        """Return the node equal to ``key`` or the smallest greater one, and whether it was equal.

        The node is None when every key in the tree is smaller.
        """
        node, found = self._find_gte(key)
        return (None if node.is_head else node), found

    def find(self, key: Any) -> Optional[JrbNode]:
        """Return a node whose key equals ``key``, or None."""
        node, found = self._find_gte(key)
        return node if found else None

    def insert(self, key: Any, value: Any = None) -> JrbNode:
        """Insert ``key`` with ``value`` and return the new node."""
        target, _ = self._find_gte(key)
        node = self._insert_before(target, key, value)
        self._size += 1
        return node

    def _insert_before(self, n: JrbNode, key: Any, value: Any) -> JrbNode:
        if n.is_head:
            if n.parent is n:
                new = JrbNode(key, value)
                _list_insert(new, n)
                n.parent = new
                new.parent = n
                new.is_root = True
                return new
            new_right = JrbNode(key, value)
            _list_insert(new_right, n)
            new_left = new_right.blink
            new_left.is_root = False
            _new_internal(new_left, new_right, new_left.parent, new_left.is_left)
            p = _rprev(new_right)
            if not p.is_head:
                p.lext = new_right
            return new_right

        new_left = JrbNode(key, value)
        _list_insert(new_left, n)
        n.is_root = False
        _new_internal(new_left, n, n.parent, n.is_left)
        p = _lprev(new_left)
        if not p.is_head:
            p.rext = new_left
        return new_left

    def delete_node(self, node: JrbNode) -> None:
        """Remove an external node from the tree."""
        if node.internal:
            raise ValueError("cannot delete an internal node")
        if node.is_head:
            raise ValueError("cannot delete the head of a tree")
        if node.parent is None:
            raise ValueError("node is not in a tree")
        self._remove(node)
        node.flink = node.blink = node.parent = None
        self._size -= 1

    def _remove(self, n: JrbNode) -> None:
        _list_delete(n)
        p = n.parent
        if n.is_root:
            p.parent = p
            return
        s = _sibling(n)
        if p.is_root:
            s.parent = p.parent
            s.parent.parent = s
            s.is_root = True
            return
        gp = p.parent
        s.parent = gp
        if p.is_left:
            gp.flink = s
            s.is_left = True
        else:
            gp.blink = s
            s.is_left = False
        parent_was_red = p.red

        if not s.internal:
            q = _lprev(s)
            if not q.is_head:
                q.rext = s
            q = _rprev(s)
            if not q.is_head:
                q.lext = s
        elif not s.red:
            raise RuntimeError("deletion problem: sibling is black and internal")
        else:
            q = _lprev(s)
            if not q.is_head:
                q.rext = s.flink
            q = _rprev(s)
            if not q.is_head:
                q.lext = s.blink
            s.red = False
            return

        if parent_was_red:
            return

        n = s
        p = n.parent
        s = _sibling(n)
        while (
            not p.red
            and not s.red
            and s.internal
            and not s.flink.red
            and not s.blink.red
        ):
            s.red = True
            n = p
            if n.is_root:
                return
            p = n.parent
            s = _sibling(n)

        if not p.red and s.red:
            _single_rotate(p, not n.is_left)
            p.red = True
            s.red = False
            s = _sibling(n)

        if not s.internal:
            raise RuntimeError("deletion error: sibling not internal")

        il = n.is_left
        x = s.flink if il else s.blink
        z = _sibling(x)

        if z.red:
            _single_rotate(p, not il)
            z.red = False
            s.red = p.red
            p.red = False
        elif not x.red:
            if s.red or not p.red:
                raise RuntimeError("deletion error: recoloring case inconsistent")
            p.red = False
            s.red = True
        elif p.red:
            _single_rotate(s, il)
            _single_rotate(p, not il)
            x.red = False
            s.red = True
        else:
            _single_rotate(s, il)
            _single_rotate(p, not il)
            x.red = False

    def first(self) -> Optional[JrbNode]:
        """Return the node with the smallest key, or None if empty."""
        n = self._head.flink
        return None if n.is_head else n

    def last(self) -> Optional[JrbNode]:
        """Return the node with the largest key, or None if empty."""
        n = self._head.blink
        return None if n.is_head else n

    def clear(self) -> None:
        """Remove every node."""
        node = self._head.flink
        while not node.is_head:
            following = node.flink
            node.flink = node.blink = node.parent = None
            node = following
        self._head = self._make_head()
        self._size = 0

    def is_empty(self) -> bool:
        return self._head.flink is self._head

    @staticmethod
    def _check_external(node: JrbNode) -> None:
        if node.is_head or node.internal or node.parent is None:
            raise ValueError("expected an external node of a tree")

    def black_count(self, node: JrbNode) -> int:
        """Return the number of black nodes on the path from ``node`` to the root."""
        self._check_external(node)
        count = 0
        while not node.is_head:
            if not node.red:
                count += 1
            node = node.parent
        return count

    def path_length(self, node: JrbNode) -> int:
        """Return the number of nodes on the path from ``node`` to the root."""
        self._check_external(node)
        length = 0
        while not node.is_head:
            length += 1
            node = node.parent
        return length

    def __iter__(self) -> Iterator[JrbNode]:
        node = self._head.flink
        while not node.is_head:
            following = node.flink
            yield node
            node = following

    def __reversed__(self) -> Iterator[JrbNode]:
        node = self._head.blink
        while not node.is_head:
            preceding = node.blink
            yield node
            node = preceding

    def __len__(self) -> int:
        return self._size