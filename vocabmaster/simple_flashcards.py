import logging
import os
import random
import tempfile
from typing import Iterable

import genanki

from .config import TURKMEN, TargetLanguage
from .models import ExtractedWord
from .note_models import build_vocab_model

logger = logging.getLogger(__name__)


def build_vocab_deck(
    words: Iterable[ExtractedWord],
    deck_name: str = "VocabMaster Deck",
    *,
    language: TargetLanguage = TURKMEN,
    deck_id: int | None = None,
) -> genanki.Deck:
    model = build_vocab_model()
    if deck_id is None:
        deck_id = random.randrange(1_000_000_000, 9_999_999_999)
    deck = genanki.Deck(deck_id, deck_name)
    for w in words:
        note = genanki.Note(
            model=model,
            fields=[w.word, w.transcription, w.translation, language.name],
            # Keyed on the headword only
            guid=genanki.guid_for(w.word.lower(), language.name),
        )
        deck.add_note(note)
    return deck


def build_vocab_apkg(
    words: Iterable[ExtractedWord],
    deck_name: str = "VocabMaster Deck",
    *,
    language: TargetLanguage = TURKMEN,
    out_dir: str | None = None,
) -> str:
    """Write the words to an Anki .apkg file and return its path."""
    words = list(words)
    logger.info("[build_vocab_apkg] start | words=%d | deck='%s'", len(words), deck_name)
    deck = build_vocab_deck(words, deck_name, language=language)
    out_dir = out_dir or tempfile.gettempdir()
    os.makedirs(out_dir, exist_ok=True)
    out_path = os.path.join(out_dir, f"deck_{deck.deck_id}.apkg")
    genanki.Package(deck).write_to_file(out_path)
    logger.info("[build_vocab_apkg] done | out=%s", out_path)
    return out_path
