"""Converting infix expressions with single-character operands to postfix."""

_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


class ExpressionError(ValueError):
    """Raised for an infix expression that cannot be converted."""


def is_operator(symbol: str) -> bool:
    """Return whether ``symbol`` is one of the operators ^ * / + -."""
    return symbol in _PRECEDENCE


def precedence(symbol: str) -> int:
    """Return the precedence of an operator: 3 for ^, 2 for * and /, 1 for + and -, else 0."""
    return _PRECEDENCE.get(symbol, 0)


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Return the postfix form of an infix expression.

    Operands are single ASCII letters or digits; operators of equal precedence,
    ^ included, associate to the left. Any other character, including a space,
    or unmatched parentheses raise ExpressionError.
    """
    stack = ["("]
    output: list[str] = []

    def pop() -> str:
        if not stack:
            raise ExpressionError("unmatched ')' in expression")
        return stack.pop()

    for position, item in enumerate(expression + ")"):
        if item == "(":
            stack.append(item)
        elif _is_operand(item):
            output.append(item)
        elif is_operator(item):
            top = pop()
            while is_operator(top) and precedence(top) >= precedence(item):
                output.append(top)
                top = pop()
            stack.append(top)
            stack.append(item)
        elif item == ")":
            top = pop()
            while top != "(":
                output.append(top)
                top = pop()
        else:
            raise ExpressionError(f"invalid symbol {item!r} at position {position}")
    if stack:
        raise ExpressionError("unmatched '(' in expression")
    return "".join(output)