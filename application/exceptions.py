"""
Application-layer exceptions.

These exceptions are raised by the infrastructure adapters and consumed by
the application services. SDK-specific exceptions never leak past an adapter.
"""


class PushPullRunError(Exception):
    """Base class for all data-layer failures.

    `message` is the human-readable text published to the user.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreError(PushPullRunError):
    """The document store or file storage rejected an operation.

    Covers network failures and permission (row-level security) rejections.
    """

    pass


class NotFoundError(StoreError):
    """An expected document does not exist."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class DecodeError(StoreError):
    """A stored document does not match the expected schema."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class EncodingError(StoreError):
    """A record or binary payload could not be encoded before any write."""

    pass


class AuthError(PushPullRunError):
    """The identity provider rejected an operation."""

    pass
