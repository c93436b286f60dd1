from typing import Iterable, List


def fold(name: str) -> str:
    """Case-insensitive identity used for ingredient names."""
    return (name or "").lower()


def is_blank(s: str) -> bool:
    return not (s or "").strip()


def uniq(seq: Iterable[str]) -> List[str]:
    # unique, stable order
    return list(dict.fromkeys(seq))
