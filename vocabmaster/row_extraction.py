import logging
from typing import Any, Iterable, List, Sequence, Set, Tuple

from .column_roles import RoleAssignment
from .config import ImportSettings
from .models import ExtractedWord
from .simple_parsing import cell_at

logger = logging.getLogger(__name__)


def extract_words(
    rows: Iterable[Tuple[int, Sequence[Any]]],
    roles: RoleAssignment,
    settings: ImportSettings | None = None,
) -> Tuple[List[ExtractedWord], List[str], List[str]]:
    """Read words out of `(row_number, row)` pairs using the resolved columns.

    Row numbers are 1-based positions in the uploaded table and only appear in
    error messages. Bad rows and duplicates are reported and skipped; the
    first spelling of a word wins.

    Returns:
        (words, errors, duplicates)
    """
    settings = settings or ImportSettings()
    words: List[ExtractedWord] = []
    errors: List[str] = []
    duplicates: List[str] = []
    seen: Set[str] = set()

    for row_num, row in rows:
        word = cell_at(row, roles.english_col)
        transcription = cell_at(row, roles.transcription_col)
        translation = cell_at(row, roles.translation_col)

        if not word and not transcription and not translation:
            continue

        if not word:
            errors.append(f"Row {row_num}: English word is empty")
            continue
        if not translation:
            errors.append(f'Row {row_num}: {settings.language.name} translation is empty for "{word}"')
            continue

        key = word.lower()
        if key in seen:
            duplicates.append(word)
            continue
        seen.add(key)

        words.append(ExtractedWord(
            word=word,
            transcription=transcription or settings.placeholder,
            translation=translation,
        ))

    logger.debug(
        "[extract_words] accepted=%d | errors=%d | duplicates=%d",
        len(words), len(errors), len(duplicates),
    )
    return words, errors, duplicates
