"""Per-column statistics used to guess what each spreadsheet column holds.

Every rule works on a single cell and is registered by name in
`CELL_PREDICATES` (yes/no checks, aggregated as the share of matching cells)
or in the scorers returned by `cell_scorers()` (0..1 values, aggregated as a
mean). `score_columns` applies them to a sample of rows.
"""

import logging
import re
from dataclasses import dataclass
from statistics import mean
from typing import Any, Callable, Dict, List, Sequence

from .config import TURKMEN, TargetLanguage
from .simple_parsing import cell_at

logger = logging.getLogger(__name__)

# Spacing and punctuation ignored when measuring which alphabet a cell uses
_NOISE_RE = re.compile(r"[\s\-'.,!?;:()]")
_LATIN_RE = re.compile(r"[a-zA-Z]")
_CYRILLIC_RE = re.compile(r"[\u0400-\u04ff]")
_CJK_RE = re.compile(r"[\u3000-\u9fff\uf900-\ufaff]")
_DIGITS_RE = re.compile(r"[0-9]+")

_IPA_RE = re.compile(r"[əɪʌːθðŋæʃʒɑɔʊɛɜɒʍʰˈˌ\u0250-\u02af]")
_WRAPPED_START_RE = re.compile(r"^\s*[\[/]")
_WRAPPED_END_RE = re.compile(r"[\]/]\s*$")
_BRACKETED_RE = re.compile(r"[\[/].*[\]/]")


def _clean(value: str) -> str:
    return _NOISE_RE.sub("", value)


def looks_like_transcription(value: str) -> bool:
    """[ˈæpəl], /ˈæpəl/ or anything carrying an IPA symbol."""
    if not value:
        return False
    if _WRAPPED_START_RE.search(value) and _WRAPPED_END_RE.search(value):
        return True
    if _IPA_RE.search(value):
        return True
    return bool(_BRACKETED_RE.search(value))


def is_cyrillic(value: str) -> bool:
    if not value:
        return False
    cleaned = _clean(value)
    cyrillic = len(_CYRILLIC_RE.findall(cleaned))
    return cyrillic / max(len(cleaned), 1) > 0.5


def is_cjk(value: str) -> bool:
    return bool(value) and bool(_CJK_RE.search(value))


def is_numeric(value: str) -> bool:
    return bool(_DIGITS_RE.fullmatch(value.strip())) if value else False


def english_density(value: str) -> float:
    """Share of basic Latin letters among the cell's letters and symbols."""
    if not value:
        return 0.0
    cleaned = _clean(value)
    if not cleaned:
        return 0.0
    return len(_LATIN_RE.findall(cleaned)) / len(cleaned)


def target_density(value: str, language: TargetLanguage = TURKMEN) -> float:
    """How strongly a cell points at the target language.

    Any Cyrillic letter rules the cell out. A single target-only letter is
    worth at least 0.8; plain Latin text keeps a small score because it could
    still be either language.
    """
    if not value:
        return 0.0
    cleaned = _clean(value)
    if not cleaned:
        return 0.0
    if _CYRILLIC_RE.search(cleaned):
        return 0.0
    diacritics = set(language.diacritics)
    specific = sum(1 for ch in cleaned if ch in diacritics)
    if specific > 0:
        return 0.8 + (specific / len(cleaned)) * 0.2
    latin = sum(1 for ch in cleaned if ch in diacritics or _LATIN_RE.match(ch))
    return (latin / len(cleaned)) * 0.3


CELL_PREDICATES: Dict[str, Callable[[str], bool]] = {
    "transcription": looks_like_transcription,
    "cyrillic": is_cyrillic,
    "cjk": is_cjk,
    "numeric": is_numeric,
}


def cell_scorers(language: TargetLanguage = TURKMEN) -> Dict[str, Callable[[str], float]]:
    return {
        "english": english_density,
        "target": lambda value: target_density(value, language),
    }


@dataclass(frozen=True)
class ColumnSignal:
    col: int
    empty: bool
    trans_pct: float = 0.0
    eng_score: float = 0.0
    target_score: float = 0.0
    cyr_pct: float = 0.0
    cjk_pct: float = 0.0
    num_pct: float = 0.0
    avg_length: float = 0.0
    sample_size: int = 0


def score_column(values: List[str], col: int, language: TargetLanguage = TURKMEN) -> ColumnSignal:
    """Aggregate the cell rules over the non-empty sampled values of one column."""
    if not values:
        return ColumnSignal(col=col, empty=True)

    n = len(values)
    fractions = {
        name: sum(1 for v in values if predicate(v)) / n
        for name, predicate in CELL_PREDICATES.items()
    }
    scores = {
        name: mean(scorer(v) for v in values)
        for name, scorer in cell_scorers(language).items()
    }
    return ColumnSignal(
        col=col,
        empty=False,
        trans_pct=fractions["transcription"],
        eng_score=scores["english"],
        target_score=scores["target"],
        cyr_pct=fractions["cyrillic"],
        cjk_pct=fractions["cjk"],
        num_pct=fractions["numeric"],
        avg_length=mean(len(v) for v in values),
        sample_size=n,
    )


def score_columns(
    rows: Sequence[Sequence[Any]],
    width: int,
    language: TargetLanguage = TURKMEN,
    sample_rows: int = 30,
) -> List[ColumnSignal]:
    """Score every column index below `width` using the first `sample_rows` rows.

    `rows` are data rows with the header already removed and blank rows
    dropped.
    """
    sample = list(rows[:sample_rows])
    signals: List[ColumnSignal] = []
    for col in range(width):
        values = [v for v in (cell_at(r, col) for r in sample) if v]
        signal = score_column(values, col, language)
        logger.debug(
            "[score_columns] col=%d | empty=%s | n=%d | trans=%.2f | eng=%.2f | target=%.2f | cyr=%.2f | cjk=%.2f | num=%.2f",
            col + 1, signal.empty, signal.sample_size, signal.trans_pct, signal.eng_score,
            signal.target_score, signal.cyr_pct, signal.cjk_pct, signal.num_pct,
        )
        signals.append(signal)
    return signals
