from __future__ import annotations


class ReadabilityError(ValueError):
    """Raised when a readability formula cannot be evaluated for a text."""

    def __init__(self, formula: str, message: str) -> None:
        super().__init__(message)
        self.formula = formula


class EmptyInputError(ReadabilityError):
    """The input text has zero length."""

    def __init__(self, formula: str) -> None:
        super().__init__(formula, f"Empty text. Cannot calculate {formula}.")


class NoWordsError(ReadabilityError):
    """No words were parsed, so per-word ratios would divide by zero."""

    def __init__(self, formula: str) -> None:
        super().__init__(formula, f"No words were parsed. Cannot calculate {formula}.")


class NoSentencesError(ReadabilityError):
    """No sentence terminators remained after abbreviation correction."""

    def __init__(self, formula: str) -> None:
        super().__init__(
            formula, f"No sentences were parsed. Cannot calculate {formula}."
        )
