"""
Collation Keys.

Sort keys approximating a locale-aware, case-insensitive comparison
(accents and case are ignored) and its numeric-aware ("natural") variant,
where digit runs compare by value so that "BIO2" sorts before "BIO10".
"""

from __future__ import annotations

import re
import unicodedata
from typing import Tuple, Union

_DIGIT_RUNS = re.compile(r"(\d+)")

NaturalKey = Tuple[Union[str, int], ...]


def text_key(value: str) -> str:
    """
    Case- and accent-insensitive key for plain text.

    Args:
        value: Text to collate

    Returns:
        Casefolded text with combining marks removed
    """
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def natural_key(value: str) -> NaturalKey:
    """
    Numeric-aware key: text runs collate like text_key, digit runs by value.

    ``re.split`` with a capturing group always yields text at even indexes
    and digits at odd indexes, so two keys compare position by position
    with matching types.
    """
    parts = _DIGIT_RUNS.split(text_key(value))
    return tuple(int(part) if index % 2 else part for index, part in enumerate(parts))
