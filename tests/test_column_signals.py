from __future__ import annotations

import pytest

from vocabmaster.column_signals import (
    CELL_PREDICATES,
    cell_scorers,
    english_density,
    is_cjk,
    is_cyrillic,
    is_numeric,
    looks_like_transcription,
    score_columns,
    target_density,
)
from vocabmaster.config import TargetLanguage


@pytest.mark.parametrize("value", ["[ˈæpəl]", "/ˈæpəl/", "ˈwɔːtə", " [bʊk] ", "a [b] c"])
def test_transcription_like_values(value: str) -> None:
    assert looks_like_transcription(value) is True


@pytest.mark.parametrize("value", ["apple", "and/or", "alma", "", "12"])
def test_non_transcription_values(value: str) -> None:
    assert looks_like_transcription(value) is False


def test_english_density_ignores_spacing_and_punctuation() -> None:
    assert english_density("apple") == 1.0
    assert english_density("don't stop!") == 1.0
    assert english_density("123") == 0.0
    assert english_density("--") == 0.0
    assert english_density("ab12") == pytest.approx(0.5)


def test_target_density_rewards_diacritics() -> None:
    assert target_density("şeýle") == pytest.approx(0.8 + (2 / 5) * 0.2)
    assert target_density("öý") == pytest.approx(1.0)


def test_target_density_plain_latin_is_low_but_nonzero() -> None:
    assert target_density("alma") == pytest.approx(0.3)
    assert target_density("a1") == pytest.approx(0.15)


def test_target_density_is_zero_with_cyrillic() -> None:
    assert target_density("яблоко") == 0.0
    assert target_density("şeýle д") == 0.0


def test_target_density_uses_language_diacritics() -> None:
    german = TargetLanguage(name="German", diacritics="äöüßÄÖÜ")
    assert target_density("straße", german) == pytest.approx(0.8 + (1 / 6) * 0.2)
    assert target_density("şeýle", german) == pytest.approx(0.3 * 3 / 5)


def test_script_predicates() -> None:
    assert is_cyrillic("яблоко") is True
    assert is_cyrillic("apple я") is False
    assert is_cjk("りんご") is True
    assert is_cjk("林檎") is True
    assert is_cjk("apple") is False
    assert is_numeric("12") is True
    assert is_numeric("12a") is False
    assert is_numeric("") is False


def test_rule_tables_are_named() -> None:
    assert set(CELL_PREDICATES) == {"transcription", "cyrillic", "cjk", "numeric"}
    assert set(cell_scorers()) == {"english", "target"}


def test_score_columns(vocabulary) -> None:
    rows = [[str(i), eng, ipa, tk, ru, ""] for i, (eng, ipa, tk, ru) in enumerate(vocabulary, start=1)]

    signals = score_columns(rows, width=6)

    assert [s.col for s in signals] == [0, 1, 2, 3, 4, 5]
    number, english, ipa, turkmen, russian, empty = signals
    assert number.num_pct == 1.0
    assert english.eng_score == 1.0
    assert english.trans_pct == 0.0
    assert ipa.trans_pct == 1.0
    assert turkmen.target_score > 0.4
    assert turkmen.target_score > english.target_score
    assert russian.cyr_pct == 1.0
    assert russian.target_score == 0.0
    assert empty.empty is True
    assert empty.sample_size == 0
    assert english.sample_size == len(vocabulary)


def test_score_columns_samples_first_rows_only() -> None:
    rows = [["word", "[wɜːd]"]] * 30 + [["слово", "слово"]] * 10

    signals = score_columns(rows, width=2, sample_rows=30)

    assert signals[0].sample_size == 30
    assert signals[0].cyr_pct == 0.0
    assert signals[1].trans_pct == 1.0


def test_score_columns_handles_ragged_rows() -> None:
    rows = [["apple"], ["book", "kitap"], ["water", None, "extra"]]

    signals = score_columns(rows, width=3)

    assert signals[0].sample_size == 3
    assert signals[1].sample_size == 1
    assert signals[2].sample_size == 1
    assert signals[0].avg_length == pytest.approx((5 + 4 + 5) / 3)
