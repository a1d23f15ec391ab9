from .div import DIVIDEND, DIVISOR, Operands, Result, divide, format_result

__all__ = [
    "DIVIDEND",
    "DIVISOR",
    "Operands",
    "Result",
    "divide",
    "format_result",
]
