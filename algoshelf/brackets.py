"""Checking that brackets in a string are balanced."""

_PAIRS = {"(": ")", "[": "]", "{": "}"}


def is_balanced(text: str) -> bool:
    """Return whether ``text`` is a balanced string of (), [] and {}.

    Every character that is not an opening bracket must close the most
    recently opened one, so any other character makes the text unbalanced.
    """
    stack: list[str] = []
    for ch in text:
        if ch in _PAIRS:
            stack.append(ch)
        elif not stack or _PAIRS[stack.pop()] != ch:
            return False
    return not stack