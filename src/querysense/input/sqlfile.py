import logging
from datetime import datetime
from pathlib import Path

from querysense.domain import Query, QueryMetadata

logger = logging.getLogger(__name__)


def split_statements(script: str) -> list[str]:
    """Split a SQL script on semicolons outside quotes and comments.

    Comments are removed (a block comment becomes a single space), statements
    are stripped, the terminating ``;`` is dropped and empty chunks are skipped.
    """
    statements: list[str] = []
    current: list[str] = []
    quote: str | None = None
    in_line_comment = False
    in_block_comment = False
    i = 0

    while i < len(script):
        char = script[i]
        pair = script[i : i + 2]

        if in_line_comment:
            if char == "\n":
                in_line_comment = False
                current.append(char)
        elif in_block_comment:
            if pair == "*/":
                i += 2
                in_block_comment = False
                continue
        elif quote is not None:
            if char == quote:
                quote = None
            current.append(char)
        elif pair == "--":
            in_line_comment = True
        elif pair == "/*":
            current.append(" ")
            i += 2
            in_block_comment = True
            continue
        elif char == ";":
            _flush(current, statements)
            current = []
        else:
            if char in ("'", '"'):
                quote = char
            current.append(char)
        i += 1

    _flush(current, statements)
    return statements


def _flush(current: list[str], statements: list[str]) -> None:
    statement = "".join(current).strip()
    if statement:
        statements.append(statement)


class SqlFileInput:
    """Input adapter that yields each statement of a SQL script file."""

    def __init__(self, file_path: str | Path, database_type: str = "postgresql") -> None:
        self._file_path = Path(file_path)
        self._database_type = database_type
        self._statements: list[str] | None = None
        self._index: int = 0

    @classmethod
    def from_text(
        cls,
        script: str,
        database_type: str = "postgresql",
        name: str = "<stdin>",
    ) -> "SqlFileInput":
        """Create adapter from an already-loaded script (stdin, tests)."""
        instance = cls(name, database_type=database_type)
        instance._statements = split_statements(script)
        return instance

    def __aiter__(self) -> "SqlFileInput":
        return self

    async def __anext__(self) -> Query:
        if self._statements is None:
            self._load()

        if self._index >= len(self._statements):  # type: ignore[arg-type]
            raise StopAsyncIteration

        statement = self._statements[self._index]  # type: ignore[index]
        self._index += 1
        metadata = QueryMetadata(
            database_type=self._database_type,
            timestamp=datetime.now(),
            source=f"file:{self._file_path.name}:{self._index}",
        )
        return Query(sql=statement, metadata=metadata)

    def _load(self) -> None:
        if not self._file_path.exists():
            raise FileNotFoundError(f"SQL file not found: {self._file_path}")
        script = self._file_path.read_text(encoding="utf-8")
        self._statements = split_statements(script)
        logger.debug("Loaded %d statement(s) from %s", len(self._statements), self._file_path)
