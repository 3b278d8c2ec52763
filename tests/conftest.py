from __future__ import annotations

import pytest


# (english, transcription, turkmen, russian)
VOCABULARY = [
    ("apple", "[ˈæpəl]", "alma", "яблоко"),
    ("book", "[bʊk]", "kitap", "книга"),
    ("water", "[ˈwɔːtə]", "suw", "вода"),
    ("house", "[haʊs]", "öý", "дом"),
    ("friend", "[frend]", "dost", "друг"),
    ("school", "[skuːl]", "mekdep", "школа"),
    ("teacher", "[ˈtiːtʃə]", "mugallym", "учитель"),
    ("bread", "[bred]", "çörek", "хлеб"),
    ("milk", "[mɪlk]", "süýt", "молоко"),
    ("sun", "[sʌn]", "gün", "солнце"),
    ("moon", "[muːn]", "aý", "луна"),
    ("star", "[stɑː]", "ýyldyz", "звезда"),
]


@pytest.fixture
def vocabulary():
    return list(VOCABULARY)


@pytest.fixture
def five_column_table():
    """Header, row number, English, IPA, Turkmen and a Russian column."""
    table = [["#", "Word", "Transcription", "Translation", "Russian"]]
    for i, (eng, ipa, tk, ru) in enumerate(VOCABULARY, start=1):
        table.append([str(i), eng, ipa, tk, ru])
    return table


@pytest.fixture
def plain_table():
    """English, Turkmen; no header, no transcription."""
    return [[eng, tk] for eng, _, tk, _ in VOCABULARY]
