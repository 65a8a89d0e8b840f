import re
from typing import Any, Dict, List

ISO_DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")

BOOK_FIELD_TYPES = {
    "isbn": str,
    "title": str,
    "author": str,
    "publish_date": str,
    "publisher": str,
    "pages": int,
    "description": str,
    "website": str,
}


def book_schema_errors(book: Dict[str, Any]) -> List[str]:
    """Return human-readable problems with a book record; empty if it is well formed."""
    if not isinstance(book, dict):
        return [f"expected an object, got {type(book).__name__}"]

    errors: List[str] = []
    for field, expected in BOOK_FIELD_TYPES.items():
        if field not in book:
            errors.append(f"missing field '{field}'")
            continue
        val = book[field]
        # bool is an int subclass but never a page count
        if isinstance(val, bool) or not isinstance(val, expected):
            errors.append(
                f"field '{field}' should be {expected.__name__}, got {type(val).__name__}")

    publish_date = book.get("publish_date")
    if isinstance(publish_date, str) and not ISO_DATETIME_RE.match(publish_date):
        errors.append(f"publish_date '{publish_date}' is not an ISO-8601 timestamp")
    return errors
