class LyricTidyError(Exception):
    """Base exception for lyrictidy."""


class FetchError(LyricTidyError):
    """Raised when an HTTP request fails."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")


class ParseError(LyricTidyError):
    """Raised when lyrics cannot be extracted from a page."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Parse error for {url}: {reason}")


class UnsupportedSiteError(LyricTidyError):
    """Raised when no adapter matches the given URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"No adapter found for URL: {url}")


class LexiconError(LyricTidyError):
    """Raised when a stop-word list or sentiment lexicon file is unusable."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Bad lexicon {path}: {reason}")


class CorpusError(LyricTidyError):
    """Raised when a lyrics corpus CSV is missing or malformed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Bad corpus {path}: {reason}")
