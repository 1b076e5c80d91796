"""Multikey quicksort for strings, and a ternary search tree."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

_INSERTION_CUTOFF = 10
_NINTHER_CUTOFF = 30


def _char(text: str, depth: int) -> int:
    """Code of the character at ``depth``, or 0 past the end of the string."""
    return ord(text[depth]) if depth < len(text) else 0


def _vecswap(items: list[str], i: int, j: int, count: int) -> None:
    for offset in range(count):
        items[i + offset], items[j + offset] = items[j + offset], items[i + offset]


def multikey_quicksort(strings: Iterable[str], rng: random.Random | None = None) -> list[str]:
    """Return the strings in ascending order using multikey quicksort with random pivots."""
    rng = rng if rng is not None else random.Random()
    x = list(strings)
    pending = [(0, len(x), 0)]
    while pending:
        lo, n, depth = pending.pop()
        if n <= 1:
            continue

        def key(i: int) -> int:
            return _char(x[lo + i], depth)

        def swap(i: int, j: int) -> None:
            x[lo + i], x[lo + j] = x[lo + j], x[lo + i]

        swap(0, rng.randrange(n))
        v = key(0)
        a = b = 1
        c = d = n - 1
        while True:
            while b <= c and (r := key(b) - v) <= 0:
                if r == 0:
                    swap(a, b)
                    a += 1
                b += 1
            while b <= c and (r := key(c) - v) >= 0:
                if r == 0:
                    swap(c, d)
                    d -= 1
                c -= 1
            if b > c:
                break
            swap(b, c)
            b += 1
            c -= 1
        r = min(a, b - a)
        _vecswap(x, lo, lo + b - r, r)
        r = min(d - c, n - d - 1)
        _vecswap(x, lo + b, lo + n - r, r)
        less = b - a
        greater = d - c
        pending.append((lo, less, depth))
        if v != 0:
            pending.append((lo + less, a + n - d - 1, depth + 1))
        pending.append((lo + n - greater, greater, depth))
    return x


def _insertion_sort_suffixes(items: list[str], lo: int, n: int, depth: int) -> None:
    for i in range(lo + 1, lo + n):
        j = i
        while j > lo and items[j - 1][depth:] > items[j][depth:]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1


def _median_of_three(items: list[str], a: int, b: int, c: int, depth: int) -> int:
    va, vb = _char(items[a], depth), _char(items[b], depth)
    if va == vb:
        return a
    vc = _char(items[c], depth)
    if vc in (va, vb):
        return c
    if va < vb:
        return b if vb < vc else (c if va < vc else a)
    return b if vb > vc else (a if va < vc else c)


def multikey_quicksort_fast(strings: Iterable[str]) -> list[str]:
    """Return the strings in ascending order using tuned multikey quicksort.

    Uses median-of-three (pseudo-median of nine on large ranges) pivots and
    insertion sort for small ranges.
    """
    x = list(strings)
    pending = [(0, len(x), 0)]
    while pending:
        lo, n, depth = pending.pop()
        if n < _INSERTION_CUTOFF:
            _insertion_sort_suffixes(x, lo, n, depth)
            continue
        pl, pm, pn = lo, lo + n // 2, lo + n - 1
        if n > _NINTHER_CUTOFF:
            d = n // 8
            pl = _median_of_three(x, pl, pl + d, pl + 2 * d, depth)
            pm = _median_of_three(x, pm - d, pm, pm + d, depth)
            pn = _median_of_three(x, pn - 2 * d, pn - d, pn, depth)
        pm = _median_of_three(x, pl, pm, pn, depth)
        x[lo], x[pm] = x[pm], x[lo]
        partval = _char(x[lo], depth)
        pa = pb = lo + 1
        pc = pd = lo + n - 1
        while True:
            while pb <= pc and (r := _char(x[pb], depth) - partval) <= 0:
                if r == 0:
                    x[pa], x[pb] = x[pb], x[pa]
                    pa += 1
                pb += 1
            while pb <= pc and (r := _char(x[pc], depth) - partval) >= 0:
                if r == 0:
                    x[pc], x[pd] = x[pd], x[pc]
                    pd -= 1
                pc -= 1
            if pb > pc:
                break
            x[pb], x[pc] = x[pc], x[pb]
            pb += 1
            pc -= 1
        end = lo + n
        r = min(pa - lo, pb - pa)
        _vecswap(x, lo, pb - r, r)
        r = min(pd - pc, end - pd - 1)
        _vecswap(x, pb, end - r, r)
        less = pb - pa
        greater = pd - pc
        if less > 1:
            pending.append((lo, less, depth))
        if partval != 0:
            pending.append((lo + less, pa - lo + end - pd - 1, depth + 1))
        if greater > 1:
            pending.append((lo + n - greater, greater, depth))
    return x


@dataclass(slots=True)
class _TstNode:
    split: int
    lo: _TstNode | None = None
    eq: _TstNode | None = None
    hi: _TstNode | None = None
    word: str | None = None


def _codes(word: str) -> list[int]:
    return [ord(ch) for ch in word] + [0]


class TernarySearchTree:
    """A set of strings stored in a ternary search tree."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root: _TstNode | None = None
        self._size = 0
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add a word; adding a word already present changes nothing.

        Raises ValueError for words containing a NUL character.
        """
        if "\0" in word:
            raise ValueError("words may not contain NUL characters")
        codes = _codes(word)
        i = 0
        parent: _TstNode | None = None
        attr = ""
        node = self._root
        while True:
            c = codes[i]
            if node is None:
                node = _TstNode(c)
                if parent is None:
                    self._root = node
                else:
                    setattr(parent, attr, node)
            if c < node.split:
                parent, attr, node = node, "lo", node.lo
            elif c > node.split:
                parent, attr, node = node, "hi", node.hi
            else:
                if c == 0:
                    if node.word is None:
                        node.word = word
                        self._size += 1
                    return
                i += 1
                parent, attr, node = node, "eq", node.eq

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or "\0" in word:
            return False
        codes = _codes(word)
        i = 0
        node = self._root
        while node is not None:
            c = codes[i]
            if c < node.split:
                node = node.lo
            elif c > node.split:
                node = node.hi
            else:
                if c == 0:
                    return True
                i += 1
                node = node.eq
        return False

    def __len__(self) -> int:
        return self._size

    def partial_match(self, pattern: str) -> list[str]:
        """Return the stored words matching ``pattern``, where '.' matches any one character.

        Words come back in ascending order.
        """
        codes = _codes(pattern)
        dot = ord(".")
        found: list[str] = []

        def visit(node: _TstNode | None, i: int) -> None:
            if node is None:
                return
            c = codes[i]
            if c == dot or c < node.split:
                visit(node.lo, i)
            if (c == dot or c == node.split) and node.split and c:
                visit(node.eq, i + 1)
            if c == 0 and node.split == 0 and node.word is not None:
                found.append(node.word)
            if c == dot or c > node.split:
                visit(node.hi, i)

        visit(self._root, 0)
        return found

    def near_words(self, word: str, distance: int) -> list[str]:
        """Return the stored words within ``distance`` edits of ``word``.

        A differing character or a character beyond the end of ``word`` costs one;
        leftover characters of ``word`` count one each. Words come back in
        ascending order.
        """
        codes = _codes(word)
        length = len(codes) - 1
        found: list[str] = []

        def visit(node: _TstNode | None, i: int, d: int) -> None:
            if node is None or d < 0:
                return
            c = codes[i]
            if d > 0 or c < node.split:
                visit(node.lo, i, d)
            if node.split == 0:
                if length - i <= d and node.word is not None:
                    found.append(node.word)
            else:
                visit(node.eq, i + 1 if c else i, d if c == node.split else d - 1)
            if d > 0 or c > node.split:
                visit(node.hi, i, d)

        visit(self._root, 0, distance)
        return found