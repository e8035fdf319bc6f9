import re
from typing import Any


def to_clean_table_cell(value: Any, *, max_len: int | None = None) -> str:
    """
    Helper function to turn a value into a single Markdown table cell.
        * strings are shown quoted, everything else through `str`
        * removes unwanted bytes
        * replaces new lines
        * escapes "|"
        * can be length restricted using `max_len`
    """
    text = repr(value) if isinstance(value, str) else str(value)
    text = re.sub(r"[^\x20-\x7E\r\n\t]", "?", text)
    text = text.replace("\n", "\\n").replace("\r", "").replace("|", "\\|")
    if max_len is not None and len(text) > max_len:
        text = text[:max_len] + " (...)"
    return text


# ---------------------------------------------------------------------------- #
#                             General Parser Helper                            #
# ---------------------------------------------------------------------------- #


def parse_value(raw: str) -> int | float | str:
    """Parses a command line value as `int`, then `float`. Anything else
    is kept as the original string."""

    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


def parse_values(raws: list[str]) -> list[int | float | str]:
    return [parse_value(raw) for raw in raws]
