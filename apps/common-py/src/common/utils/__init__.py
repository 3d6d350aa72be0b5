"""Small stateless helpers used by the API handlers."""

from common.utils.chunking import chunk
from common.utils.dates import format_future_date, parse_days
from common.utils.ids import generate_id

__all__ = [
    "chunk",
    "format_future_date",
    "generate_id",
    "parse_days",
]
