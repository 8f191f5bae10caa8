"""Custom column types."""
from typing import List, Optional
from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator


class CommaSeparatedList(TypeDecorator):
    """
    Ordered list of strings stored as one comma-joined text column.

    Writes join with ``,``; reads split on ``,`` and drop empty tokens, so
    ``NULL`` and ``""`` both load as an empty list. The delimiter is not
    escaped: values must not contain commas.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Optional[List[str]], dialect) -> str:
        return ",".join(value or [])

    def process_result_value(self, value: Optional[str], dialect) -> List[str]:
        if not value:
            return []
        return [token for token in value.split(",") if token]
