"""
Load video rows from files exported by the metadata provider.

Supported formats:
  .json   a list of rows, or an object holding one under videos/items/rows
  .jsonl  one row per line
  .csv    header row with snake_case or camelCase columns
"""
import json
import logging
import os
from typing import Any, Dict, List

import pandas as pd

from ..authority.models import VideoRecord

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".json", ".jsonl", ".csv")

# Keys that may wrap a list of rows in a JSON document
_LIST_KEYS = ("videos", "items", "rows")


def items_from_payload(payload: Any) -> List[Dict]:
    """Extract the list of row dicts from a decoded JSON document."""
    if isinstance(payload, list):
        return [item for item in payload if isinstance(item, dict)]
    if isinstance(payload, dict):
        for key in _LIST_KEYS:
            value = payload.get(key)
            if isinstance(value, list):
                return [item for item in value if isinstance(item, dict)]
    return []


def read_json_file(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _read_jsonl(path: str) -> List[Dict]:
    rows = []
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                rows.append(json.loads(line))
            except json.JSONDecodeError as e:
                logger.warning("Skipping malformed line %d in %s: %s", line_no, path, e)
    return [row for row in rows if isinstance(row, dict)]


def _read_csv(path: str) -> List[Dict]:
    df = pd.read_csv(path, dtype=str)
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")


def load_rows(path: str) -> List[Dict]:
    """Read raw row dicts from a JSON, JSONL or CSV file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the extension is not supported.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Input file not found: {path}")

    ext = os.path.splitext(path)[1].lower()
    if ext == ".json":
        return items_from_payload(read_json_file(path))
    if ext == ".jsonl":
        return _read_jsonl(path)
    if ext == ".csv":
        return _read_csv(path)
    raise ValueError(
        f"Unsupported file type '{ext}'. Expected one of: {', '.join(SUPPORTED_EXTENSIONS)}"
    )


def records_from_rows(rows: List[Dict]) -> List[VideoRecord]:
    """Convert row dicts to VideoRecords, skipping rows without id or channel id."""
    records = []
    skipped = 0
    for row in rows:
        record = VideoRecord.from_row(row)
        if not record.id or not record.channel_id:
            skipped += 1
            continue
        records.append(record)
    if skipped:
        logger.warning("Skipped %d rows missing id or channel_id", skipped)
    return records


def load_records(path: str) -> List[VideoRecord]:
    """Load VideoRecords from a file."""
    records = records_from_rows(load_rows(path))
    logger.info("Loaded %d video records from %s", len(records), path)
    return records
