from typing import Any

from bson import ObjectId


def is_valid_id(value: Any) -> bool:
    """
    Check that `value` looks like a MongoDB ObjectId before it reaches a query.
    Only 24-character hex strings pass; bytes, None and numbers never do.
    """
    if not isinstance(value, str) or not value:
        return False
    return ObjectId.is_valid(value)
