"""Filename normalization: strip characters that are unsafe in a system name"""

import re
import unicodedata
from typing import Callable


# (raw, keep) -> normalized; keep lists extra characters to preserve
Normalizer = Callable[[str, str], str]

SAFE_CHARS = "-_. "


def normalize_filename(raw: str, keep: str = "") -> str:
    """Transliterate to ASCII, drop unsafe characters, and collapse whitespace.

    Spaces survive so the caller can substitute its own space token.
    """
    text = unicodedata.normalize("NFKD", raw).encode("ascii", "ignore").decode("ascii")
    allowed = re.escape(SAFE_CHARS + keep)
    text = re.sub(rf"[^A-Za-z0-9{allowed}]", "", text)
    return re.sub(r"\s+", " ", text).strip()
