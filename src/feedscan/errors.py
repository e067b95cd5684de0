"""Exception types raised by feedscan."""


class FeedscanError(RuntimeError):
    """Base class for feedscan errors."""


class DocumentQueryError(FeedscanError):
    """Raised when the document cannot be queried at all.

    Nothing can proceed without a queryable document, so this is the one
    failure that propagates out of polling and extraction.
    """
