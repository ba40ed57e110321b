"""Build-time failures. Each aborts the whole build; no partial index survives."""


class IndexBuildError(Exception):
    pass


class SourceUnavailable(IndexBuildError):
    """A document or the document list could not be opened or read."""


class ConfigUnavailable(IndexBuildError):
    """The noise-word file could not be opened or read."""
