from querysense.input.base import QueryInput
from querysense.input.manual import ManualInput
from querysense.input.sqlfile import SqlFileInput, split_statements

__all__ = [
    "QueryInput",
    "ManualInput",
    "SqlFileInput",
    "split_statements",
]
