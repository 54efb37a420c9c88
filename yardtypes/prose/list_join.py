"""
List formatting for rendered type descriptions.
"""

from typing import Sequence


def list_join(items: Sequence[str], conjunction: str = "or") -> str:
    """
    Join already-rendered strings as an English list of alternatives.

    ``[]`` -> ``""``, ``["X"]`` -> ``"X"``, ``["X", "Y"]`` -> ``"X or Y"``,
    ``["X", "Y", "Z"]`` -> ``"X, Y or Z"``.  There is no serial comma.
    """
    items = [str(item) for item in items]
    if len(items) < 2:
        return "".join(items)
    return ", ".join(items[:-1]) + f" {conjunction} " + items[-1]
