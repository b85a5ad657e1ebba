"""Custom exception hierarchy for triebpe training and tokenization errors."""

from .types import Token


class TrieBPEError(Exception):
    """Base exception for all triebpe errors."""


class TrainingError(TrieBPEError):
    """Raised when a merge round or training run is configured incorrectly."""

    def __init__(self, message: str, *, min_freq: int | None = None) -> None:
        if min_freq is not None:
            message = f"{message} (min_freq: {min_freq})"
        super().__init__(message)
        self.min_freq = min_freq


class VocabularyError(TrieBPEError):
    """Raised when vocabulary operations fail."""

    def __init__(self, message: str, *, token: Token | None = None) -> None:
        """Initialize with optional token that gets appended to the message."""
        if token is not None:
            message = f"{message} (invalid token: {token!r})"
        super().__init__(message)
        self.token = token


class CorpusError(TrieBPEError):
    """Raised when a corpus item cannot be turned into a weighted word."""

    def __init__(self, message: str, *, item: object = None) -> None:
        if item is not None:
            message = f"{message} (got {item!r})"
        super().__init__(message)
        self.item = item


class StrategyError(TrieBPEError):
    """Raised when a strategy or mode name is not recognised."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available}) (got {invalid_name}) "
        super().__init__(message + extra)
        self.invalid_name = invalid_name
        self.available = available
