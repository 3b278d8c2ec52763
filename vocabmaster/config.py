import os
from dataclasses import dataclass, field
from typing import FrozenSet

__all__ = [
    "TargetLanguage",
    "TURKMEN",
    "ImportSettings",
    "ENV_MIN_WORDS",
    "ENV_MAX_WORDS",
    "ENV_SAMPLE_ROWS",
]


ENV_MIN_WORDS = "VOCAB_MIN_WORDS"
ENV_MAX_WORDS = "VOCAB_MAX_WORDS"
ENV_SAMPLE_ROWS = "VOCAB_SAMPLE_ROWS"


@dataclass(frozen=True)
class TargetLanguage:
    """The language the English words are translated into.

    `diacritics` are letters the language has and English lacks; they are the
    strongest hint that a column holds translations. `header_tokens` are
    extra words (lowercase) that may start a header cell, e.g. the language's
    own name.
    """

    name: str
    diacritics: str
    header_tokens: FrozenSet[str] = frozenset()


TURKMEN = TargetLanguage(
    name="Turkmen",
    diacritics="äçşňöüýžÄÇŞŇÖÜÝŽ",
    header_tokens=frozenset({"söz", "soz", "turkmen", "türkmen", "terjime"}),
)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class ImportSettings:
    min_words: int = 10
    max_words: int = 200
    sample_rows: int = 30
    placeholder: str = "—"
    language: TargetLanguage = field(default=TURKMEN)

    # Role resolver thresholds
    transcription_min_pct: float = 0.3
    cyrillic_max_pct: float = 0.5
    cjk_max_pct: float = 0.3
    numeric_max_pct: float = 0.8
    ambiguous_target_below: float = 0.4
    ambiguous_english_above: float = 0.5

    def __post_init__(self) -> None:
        if self.min_words < 0:
            raise ValueError("min_words must not be negative")
        if self.max_words < self.min_words:
            raise ValueError("max_words must be >= min_words")
        if self.sample_rows < 1:
            raise ValueError("sample_rows must be at least 1")

    @classmethod
    def from_env(cls, **overrides) -> "ImportSettings":
        """Build settings from VOCAB_* environment variables; keyword overrides win."""
        values = {
            "min_words": _env_int(ENV_MIN_WORDS, cls.min_words),
            "max_words": _env_int(ENV_MAX_WORDS, cls.max_words),
            "sample_rows": _env_int(ENV_SAMPLE_ROWS, cls.sample_rows),
        }
        values.update(overrides)
        return cls(**values)
