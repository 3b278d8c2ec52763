"""Turn a decoded spreadsheet into a list of vocabulary words.

`parse_table` is the entry point. It takes rows of cells as produced by a
spreadsheet reader (or `simple_parsing.table_from_tsv`), works out the column
layout on its own and returns a `ParseResult`. It raises a
`VocabImportError` subclass when the table as a whole cannot be used; problems
with single rows are reported inside the result instead.
"""

import logging
from typing import Any, Iterable, List, Sequence, Tuple

from .column_roles import resolve_roles
from .column_signals import score_columns
from .config import ImportSettings
from .errors import CountBoundsError, DetectionError, StructuralError
from .header_detection import is_header_row
from .models import ExtractedWord, ParseResult
from .row_extraction import extract_words
from .simple_parsing import row_is_blank, table_width

logger = logging.getLogger(__name__)


def parse_table(table: Sequence[Sequence[Any] | None], settings: ImportSettings | None = None) -> ParseResult:
    settings = settings or ImportSettings()
    if not table:
        raise StructuralError("No data found in the file.")

    width = table_width(table)
    if width < 2:
        raise StructuralError("The file must have at least 2 columns.")

    skipped_header = is_header_row(table[0], settings.language)
    start = 1 if skipped_header else 0

    numbered_rows: List[Tuple[int, Sequence[Any]]] = [
        (i + 1, row)
        for i, row in enumerate(table)
        if i >= start and not row_is_blank(row)
    ]
    if not numbered_rows:
        raise StructuralError("No data rows found in the file.")

    data_rows = [row for _, row in numbered_rows]
    logger.info(
        "[parse_table] start | rows=%d | width=%d | skipped_header=%s",
        len(numbered_rows), width, skipped_header,
    )

    signals = score_columns(data_rows, width, settings.language, settings.sample_rows)
    roles = resolve_roles(signals, settings)

    if roles.english_col is None:
        raise DetectionError(
            "english",
            "Could not detect the English word column. Please ensure your file has English words.",
        )
    if roles.translation_col is None:
        language = settings.language.name
        raise DetectionError(
            "translation",
            f"Could not detect the {language} translation column. "
            f"Please ensure your file has {language} translations.",
        )

    words, errors, duplicates = extract_words(numbered_rows, roles, settings)

    if len(words) < settings.min_words:
        raise CountBoundsError(
            len(words), settings.min_words, settings.max_words,
            f"Too few words: found {len(words)}, minimum is {settings.min_words}. "
            "Please add more words to your file.",
        )
    if len(words) > settings.max_words:
        raise CountBoundsError(
            len(words), settings.min_words, settings.max_words,
            f"Too many words: found {len(words)}, maximum is {settings.max_words}. "
            "Please reduce the number of words.",
        )

    logger.info(
        "[parse_table] done | words=%d | errors=%d | duplicates=%d",
        len(words), len(errors), len(duplicates),
    )
    return ParseResult(
        words=words,
        errors=errors,
        duplicates=duplicates,
        total_rows=len(numbered_rows),
        skipped_header=skipped_header,
        detection_info=roles.detection_info,
    )


def exclude_known_words(
    words: Iterable[ExtractedWord], existing: Iterable[str]
) -> Tuple[List[ExtractedWord], int]:
    """Drop words the learner already has (case-insensitive).

    Returns:
        (new_words, skipped_count)
    """
    known = {w.strip().lower() for w in existing if w}
    fresh: List[ExtractedWord] = []
    skipped = 0
    for w in words:
        if w.word.lower() in known:
            skipped += 1
            continue
        fresh.append(w)
    return fresh, skipped
