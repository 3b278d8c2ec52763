import re
from typing import Any, Iterable, Sequence

from .config import TURKMEN, TargetLanguage
from .simple_parsing import cell_text

# A header cell only has to start with one of these
_HEADER_TOKENS = (
    "#", "no", "number", "word", "english",
    "transcription", "pronunciation", "phonetic",
    "translation", "meaning", "definition",
    "column", "col", "idx", "index",
    "rus", "russian", "japan", "japanese",
)

_MAX_HEADER_CELLS = 10
_MIN_HEADER_MATCHES = 2


def header_pattern(extra_tokens: Iterable[str] = ()) -> re.Pattern:
    tokens = set(_HEADER_TOKENS) | {t.lower() for t in extra_tokens if t}
    alternatives = "|".join(re.escape(t) for t in sorted(tokens, key=len, reverse=True))
    return re.compile(rf"^(?:{alternatives})", flags=re.IGNORECASE)


def is_header_row(row: Sequence[Any] | None, language: TargetLanguage = TURKMEN) -> bool:
    """Return True when at least two of the first ten cells look like column titles."""
    if not row or len(row) < 2:
        return False
    pattern = header_pattern(language.header_tokens)
    matches = 0
    for value in list(row)[:_MAX_HEADER_CELLS]:
        if pattern.match(cell_text(value)):
            matches += 1
    return matches >= _MIN_HEADER_MATCHES
