__all__ = [
    "VocabImportError",
    "StructuralError",
    "DetectionError",
    "CountBoundsError",
]


class VocabImportError(ValueError):
    """Base class for failures that abort a whole import."""


class StructuralError(VocabImportError):
    """The table cannot support column detection (too few columns, no rows)."""


class DetectionError(VocabImportError):
    def __init__(self, role: str, message: str):
        super().__init__(message)
        self.role = role


class CountBoundsError(VocabImportError):
    def __init__(self, count: int, minimum: int, maximum: int, message: str):
        super().__init__(message)
        self.count = count
        self.minimum = minimum
        self.maximum = maximum
