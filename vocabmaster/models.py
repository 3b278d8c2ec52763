from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class ExtractedWord:
    word: str
    transcription: str
    translation: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "word": self.word,
            "transcription": self.transcription,
            "translation": self.translation,
        }


@dataclass
class ParseResult:
    """Outcome of a successful import.

    `errors` and `duplicates` hold row-level problems that did not stop the
    import; the caller decides how to show them before saving `words`.
    """

    words: List[ExtractedWord] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    duplicates: List[str] = field(default_factory=list)
    total_rows: int = 0
    skipped_header: bool = False
    detection_info: str = ""

    def to_dict(self) -> Dict:
        return {
            "words": [w.to_dict() for w in self.words],
            "errors": list(self.errors),
            "duplicates": list(self.duplicates),
            "totalRows": self.total_rows,
            "skippedHeader": self.skipped_header,
            "detectionInfo": self.detection_info,
        }
