"""Counting the words of a text and listing them alphabetically with their frequencies."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

_CHUNK = 4096


@dataclass(eq=False)
class WordNode:
    """A word, how often it occurred, and its subtrees."""

    word: str
    frequency: int = 1
    left: WordNode | None = None
    right: WordNode | None = None


class WordTree:
    """A binary search tree of words ordered alphabetically, counting repeats."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.root: WordNode | None = None
        self._size = 0
        for word in words:
            self.add(word)

    def add(self, word: str) -> WordNode:
        """Count one occurrence of ``word`` and return its node."""
        if self.root is None:
            self.root = WordNode(word)
            self._size = 1
            return self.root
        node = self.root
        while True:
            if word > node.word:
                if node.right is None:
                    node.right = WordNode(word)
                    self._size += 1
                    return node.right
                node = node.right
            elif word < node.word:
                if node.left is None:
                    node.left = WordNode(word)
                    self._size += 1
                    return node.left
                node = node.left
            else:
                node.frequency += 1
                return node

    def __iter__(self) -> Iterator[WordNode]:
        """Iterate over the nodes in alphabetical order."""
        pending: list[WordNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node
            node = node.right

    def __len__(self) -> int:
        """Number of distinct words."""
        return self._size


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _finish(chars: list[str]) -> str:
    if chars[-1] == "-":
        chars.pop()
    return "".join(chars)


def read_words(stream: TextIO) -> Iterator[str]:
    """Yield the lower-cased words of a text stream.

    A word is a run of ASCII letters, which may also hold an apostrophe or a
    hyphen that directly follows a letter; a trailing hyphen is dropped.
    Any other character separates words.
    """
    word: list[str] = []
    for chunk in iter(lambda: stream.read(_CHUNK), ""):
        for ch in chunk:
            if _is_letter(ch):
                word.append(ch.lower())
            elif ch in "'-" and word and _is_letter(word[-1]):
                word.append(ch)
            elif word:
                yield _finish(word)
                word = []
    if word:
        yield _finish(word)


def build_word_tree(stream: TextIO) -> WordTree:
    """Return a tree of the words read from ``stream``."""
    return WordTree(read_words(stream))


def write_word_counts(tree: WordTree, stream: TextIO) -> None:
    """Write a heading, then one numbered line per word with its frequency."""
    stream.write(f"{'S/N':<5} \t {'FREQUENCY':>9} \t {'WORD'} \n")
    for number, node in enumerate(tree, start=1):
        stream.write(f"{number:<5} \t {node.frequency:<9} \t {node.word} \n")


def main(argv: list[str] | None = None) -> int:
    """Count the words of a file and append the table to another file."""
    parser = argparse.ArgumentParser(
        description="List the words of a file alphabetically with their frequencies."
    )
    parser.add_argument("input", nargs="?", default="file.txt", help="text file to read")
    parser.add_argument(
        "output", nargs="?", default="wordcount.txt", help="file the table is appended to"
    )
    args = parser.parse_args(argv)
    try:
        with open(args.input, encoding="utf-8") as source:
            tree = build_word_tree(source)
        with open(args.output, "a", encoding="utf-8") as target:
            write_word_counts(tree, target)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0