"""Exceptions raised while fetching and rendering icons."""

from __future__ import annotations


class IconError(Exception):
    """Base exception for icon errors."""

    pass


class UnknownCollection(IconError):
    """Raised when a collection name is not registered."""

    def __init__(self, collection: str):
        self.collection = collection
        super().__init__(f"Unknown icon collection: {collection}")


class FetchFailure(IconError):
    """Raised when an icon URL cannot be fetched."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class MalformedDocument(IconError):
    """Raised when fetched bytes are not a parseable SVG document."""

    pass


class MissingViewbox(IconError):
    """Raised when an icon's root element has no usable viewBox."""

    def __init__(self, value: str | None):
        self.value = value
        if value is None:
            message = "SVG root has no viewBox attribute"
        else:
            message = f"Invalid viewBox: {value!r}"
        super().__init__(message)


class ConfigurationError(IconError):
    """Raised when configuration is invalid."""

    pass
