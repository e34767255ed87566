"""Result value and the structured types it carries."""

from microresult.core.result import Result, create_result
from microresult.core.types import ErrorDetail, ErrorLevel, Pagination, ResultMeta

__all__ = [
    "ErrorDetail",
    "ErrorLevel",
    "Pagination",
    "Result",
    "ResultMeta",
    "create_result",
]
