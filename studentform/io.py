"""Input/output utilities for reading drafts and writing submit outcomes."""

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import jsonschema

from studentform.catalog import SUBJECT_CATALOG
from studentform.models import Draft, SubmitResult

DRAFT_SCHEMA_PATH = Path(__file__).parent / "schemas" / "draft.schema.json"


class DraftSchemaError(Exception):
    """Raised when a draft record does not match the draft schema."""

    def __init__(self, message: str, line_num: int | None = None) -> None:
        self.line_num = line_num
        prefix = f"Line {line_num}: " if line_num is not None else ""
        super().__init__(f"{prefix}{message}")


def load_draft_schema(path: Path | str | None = None) -> dict[str, Any]:
    """Load the draft JSON schema.

    Args:
        path: Optional schema path. Defaults to the packaged schema.
    """
    with open(path or DRAFT_SCHEMA_PATH) as f:
        schema = json.load(f)

    # Subject labels come from the catalog, not the schema file.
    if path is None:
        schema["properties"]["subjects"]["items"]["enum"] = list(SUBJECT_CATALOG)
    return schema


def check_draft_record(
    record: Any,
    schema: dict[str, Any] | None = None,
    line_num: int | None = None,
) -> Draft:
    """Check a raw record against the draft schema and build a Draft.

    Raises:
        DraftSchemaError: If the record fails schema validation.
    """
    try:
        jsonschema.validate(record, schema or load_draft_schema())
    except jsonschema.ValidationError as e:
        raise DraftSchemaError(e.message, line_num) from e
    return Draft.model_validate(record)


def read_jsonl(path: Path | str) -> Iterator[tuple[int, dict[str, Any]]]:
    """Read a JSONL file and yield (line number, record) pairs.

    Args:
        path: Path to the JSONL file.

    Yields:
        Each parsed JSON record with its 1-based line number.
    """
    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                yield line_num, json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON on line {line_num}: {e}") from e


def read_drafts(path: Path | str) -> Iterator[Draft]:
    """Read and schema-check every draft in a JSONL file."""
    schema = load_draft_schema()
    for line_num, record in read_jsonl(path):
        yield check_draft_record(record, schema, line_num)


def write_results(path: Path | str, results: Iterable[SubmitResult]) -> int:
    """Write submit outcomes as JSON lines, one outcome per line.

    Returns:
        Number of outcomes written.
    """
    lines = [json.dumps(result.to_dict(), ensure_ascii=False) for result in results]
    Path(path).write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return len(lines)
