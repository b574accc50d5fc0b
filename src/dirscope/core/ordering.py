# src/dirscope/core/ordering.py
from functools import cmp_to_key


def compare_names(a: str, b: str) -> int:
    """
    Orders names by length first, then by ordinal (code point) comparison.
    Returns a negative number, zero or a positive number like a classic cmp.
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    if a == b:
        return 0
    return -1 if a < b else 1


# Sort key equivalent to compare_names, for sorted()/bisect
name_order_key = cmp_to_key(compare_names)
