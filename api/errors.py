"""
Mapping from the application error taxonomy to HTTP errors.
"""
from fastapi import HTTPException

from application.exceptions import (
    AuthError,
    DecodeError,
    EncodingError,
    NotFoundError,
    PushPullRunError,
)


def http_error(error: PushPullRunError) -> HTTPException:
    """
    Convert an application error into an HTTPException.

    NotFoundError -> 404, EncodingError/DecodeError -> 422,
    AuthError -> 401, any other StoreError -> 502.
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=404, detail=error.message)
    if isinstance(error, (EncodingError, DecodeError)):
        return HTTPException(status_code=422, detail=error.message)
    if isinstance(error, AuthError):
        return HTTPException(status_code=401, detail=error.message)
    return HTTPException(status_code=502, detail=error.message)
