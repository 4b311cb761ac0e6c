import functools

from pymongo.errors import ConnectionFailure


class StoreUnavailable(Exception):
    """Raised when the MongoDB deployment cannot be reached."""

    def __init__(self, message: str = "Database is unavailable"):
        super().__init__(message)
        self.message = message


def translate_store_errors(func):
    """Re-raise pymongo connectivity failures from `func` as StoreUnavailable."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConnectionFailure as exc:
            raise StoreUnavailable() from exc

    return wrapper
