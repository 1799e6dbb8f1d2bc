from __future__ import annotations

import json
import math
import re
from pathlib import Path
from typing import Any, Optional


def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def to_number(value: Any) -> Optional[float]:
    """
    Numeric reading of a raw answer, or None.

    Accepts ints, floats and strings that parse as a finite number
    (surrounding whitespace allowed). Booleans, NaN and infinities are not
    numbers here.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        num = float(value)
    elif isinstance(value, str):
        try:
            num = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(num):
        return None
    return num


def contains_any(text: str, markers: tuple[str, ...]) -> bool:
    """Case-insensitive substring test; markers are expected casefolded."""
    folded = text.casefold()
    return any(m in folded for m in markers)


def contains_any_word(text: str, markers: tuple[str, ...]) -> bool:
    """
    Like contains_any, but a marker only counts as a whole word or phrase:
    "yes" matches "Yes, for irrigation" and not "yesterday" or "eyes".
    """
    folded = text.casefold()
    return any(re.search(rf"(?<!\w){re.escape(m)}(?!\w)", folded) for m in markers)


def question_sort_key(key: object) -> tuple[int, float, str]:
    """
    Canonical ordering for question keys: numeric keys by value first,
    then everything else by its string form. Keys with the same numeric
    value ("2", "2.0", 2) are ordered by their string form.
    """
    num = to_number(key)
    if num is not None:
        return (0, num, str(key))
    return (1, 0.0, str(key))
