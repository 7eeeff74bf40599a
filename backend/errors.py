"""Error taxonomy shared by the store, the suggestion client and the API."""


class RecommenderError(Exception):
    """Base class for errors surfaced at the HTTP boundary."""


class ValidationError(RecommenderError):
    """Malformed client input (missing, empty or wrong-typed skills list)."""


class ProviderError(RecommenderError):
    """The language-model call failed or returned unparseable content."""


class StoreError(RecommenderError):
    """A database operation failed."""


class NotFoundError(RecommenderError):
    """Requested role is absent from storage."""
