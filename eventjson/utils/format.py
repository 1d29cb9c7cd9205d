from __future__ import annotations


def elide(value: str, width: int = 100) -> str:
    return value if len(value) <= width else f'{value[: width - 3]}...'
