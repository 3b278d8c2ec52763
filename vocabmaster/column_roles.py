"""Decide which column is English, Transcription and Translation.

The decision runs in a fixed order on the signals from `column_signals`:

1. the transcription column is the one with the most phonetic-looking cells;
2. empty, Cyrillic, CJK and row-number columns other than the
   transcription column are ignored;
3. the remaining candidates are split into translation (strongest target
   language signal) and English (most basic-Latin text), falling back to
   average cell length when both look like plain Latin;
4. when no transcription column was found, an ignored column that still
   looks phonetic is recovered.

Unresolved roles are returned as None; the caller decides whether that is
fatal.
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence, Tuple

from .column_signals import ColumnSignal
from .config import ImportSettings
from .errors import StructuralError

logger = logging.getLogger(__name__)

ENGLISH = "English"
TRANSCRIPTION = "Transcription"
TRANSLATION = "Translation"
IGNORED = "ignored"
UNUSED = "unused"


@dataclass(frozen=True)
class RoleAssignment:
    width: int
    english_col: Optional[int] = None
    transcription_col: Optional[int] = None
    translation_col: Optional[int] = None
    ignored_cols: FrozenSet[int] = field(default_factory=frozenset)

    def role_of(self, col: int) -> str:
        if col == self.english_col:
            return ENGLISH
        if col == self.transcription_col:
            return TRANSCRIPTION
        if col == self.translation_col:
            return TRANSLATION
        if col in self.ignored_cols:
            return IGNORED
        return UNUSED

    @property
    def detection_info(self) -> str:
        parts = [f"Col {c + 1}: {self.role_of(c)}" for c in range(self.width)]
        return "Detected layout: " + " | ".join(parts)


def _transcription_eligible(s: ColumnSignal, settings: ImportSettings) -> bool:
    # Cyrillic text is another language, not IPA
    return not s.empty and s.cyr_pct <= settings.cyrillic_max_pct


def _is_noise(s: ColumnSignal, settings: ImportSettings) -> bool:
    return (
        s.empty
        or s.cyr_pct > settings.cyrillic_max_pct
        or s.cjk_pct > settings.cjk_max_pct
        or s.num_pct > settings.numeric_max_pct
    )


def _best(signals: Sequence[ColumnSignal], key) -> Optional[ColumnSignal]:
    """Highest `key`; the leftmost column wins a tie."""
    best = None
    for s in signals:
        if best is None or key(s) > key(best):
            best = s
    return best


def pick_transcription(signals: Sequence[ColumnSignal], settings: ImportSettings) -> Optional[int]:
    """Most phonetic-looking column; CJK or numeric flags do not rule it out."""
    best = _best([s for s in signals if _transcription_eligible(s, settings)], lambda s: s.trans_pct)
    if best is not None and best.trans_pct > settings.transcription_min_pct:
        return best.col
    return None


def split_candidates(
    candidates: Sequence[ColumnSignal], settings: ImportSettings
) -> Tuple[Optional[int], Optional[int]]:
    """Return (english_col, translation_col) for the candidate columns."""
    if not candidates:
        return None, None
    if len(candidates) == 1:
        return candidates[0].col, None

    translation = _best(candidates, lambda s: s.target_score)
    english = _best([s for s in candidates if s.col != translation.col], lambda s: s.eng_score)

    if (
        translation.target_score < settings.ambiguous_target_below
        and english.eng_score > settings.ambiguous_english_above
    ):
        # Both look like plain Latin: headwords are usually shorter than translations
        first, second = candidates[0], candidates[1]
        logger.info(
            "[split_candidates] no clear %s signal | comparing length col %d (%.1f) vs col %d (%.1f)",
            settings.language.name, first.col + 1, first.avg_length, second.col + 1, second.avg_length,
        )
        if first.avg_length <= second.avg_length:
            return first.col, second.col
        return second.col, first.col

    return english.col, translation.col


def resolve_roles(signals: Sequence[ColumnSignal], settings: ImportSettings | None = None) -> RoleAssignment:
    settings = settings or ImportSettings()
    width = len(signals)
    if width < 2:
        raise StructuralError("The file must have at least 2 columns.")

    transcription_col = pick_transcription(signals, settings)

    ignored = {
        s.col for s in signals
        if s.col != transcription_col and _is_noise(s, settings)
    }

    candidates: List[ColumnSignal] = [
        s for s in signals
        if s.col not in ignored and s.col != transcription_col and not s.empty
    ]
    english_col, translation_col = split_candidates(candidates, settings)

    if transcription_col is None:
        for s in signals:
            if (
                s.col in ignored
                and _transcription_eligible(s, settings)
                and s.trans_pct > settings.transcription_min_pct
            ):
                transcription_col = s.col
                ignored.discard(s.col)
                break

    roles = RoleAssignment(
        width=width,
        english_col=english_col,
        transcription_col=transcription_col,
        translation_col=translation_col,
        ignored_cols=frozenset(ignored),
    )
    logger.info("[resolve_roles] %s", roles.detection_info)
    return roles
