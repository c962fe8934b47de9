"""
Catalog Loader - Read shirt catalogs from CSV, JSON or XLSX files.

Expected columns (header names are case-insensitive):
    id,name,color,size
    3f1c...,Red - Small,Red,Small

id and name are optional: a missing id gets a fresh UUID, a missing name
becomes "<Color> - <Size>". color and size must name a member of the
closed Color/Size sets.
"""

import csv
import json
import logging
import uuid
from pathlib import Path
from typing import Optional

from openpyxl import load_workbook

from .models import Color, Shirt, Size

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".json", ".xlsx")

# Accepted header spellings per field
COLUMN_PATTERNS = {
    "id": ["id", "shirt_id", "shirt id", "uuid"],
    "name": ["name", "display_name", "display name", "description"],
    "color": ["color", "colour"],
    "size": ["size"],
}


def load_catalog(path: str | Path) -> list[Shirt]:
    """
    Load shirts from a catalog file.

    Args:
        path: .csv, .json or .xlsx file

    Returns:
        Shirts in file order

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: on unsupported formats or rows with bad color/size
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        rows = _read_csv(path)
    elif suffix == ".json":
        rows = _read_json(path)
    elif suffix == ".xlsx":
        rows = _read_xlsx(path)
    else:
        raise ValueError(f"Unsupported file format: {suffix}")

    shirts = []
    for row_num, row in enumerate(rows, start=1):
        shirt = parse_row(row, row_num=row_num)
        if shirt:
            shirts.append(shirt)

    logger.info(f"Loaded {len(shirts)} shirts from {path.name}")
    return shirts


def _read_csv(path: Path) -> list[dict]:
    # utf-8-sig strips the BOM Excel writes before the first header
    with open(path, "r", newline="", encoding="utf-8-sig") as f:
        return list(csv.DictReader(f))


def _read_json(path: Path) -> list[dict]:
    with open(path, "r") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("shirts", [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of shirts in {path}")
    for row_num, row in enumerate(data, start=1):
        if not isinstance(row, dict):
            raise ValueError(f"Expected an object (row {row_num}) in {path}")
    return data


def _read_xlsx(path: Path) -> list[dict]:
    """Rows from the first sheet, headers on row 1."""
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        sheet = workbook.worksheets[0]
        rows = sheet.iter_rows(values_only=True)
        headers = next(rows, None)
        if headers is None:
            return []

        keys = [str(h).strip() if h is not None else "" for h in headers]
        result = []
        for values in rows:
            if all(v is None for v in values):
                continue
            result.append(dict(zip(keys, values)))
        return result
    finally:
        workbook.close()


def _get_field(row: dict, field: str):
    """Look up a field under any of its accepted header names."""
    lowered = {str(k).lower().strip(): v for k, v in row.items() if k is not None}
    for pattern in COLUMN_PATTERNS[field]:
        if pattern in lowered:
            return lowered[pattern]
    return None


def parse_row(row: dict, row_num: Optional[int] = None) -> Optional[Shirt]:
    """
    Parse a row dict into a Shirt.

    Blank rows return None. Rows with a color or size outside the
    closed sets raise ValueError.
    """
    raw_color = _get_field(row, "color")
    raw_size = _get_field(row, "size")

    if raw_color in (None, "") and raw_size in (None, ""):
        return None

    where = f" (row {row_num})" if row_num is not None else ""
    if raw_color in (None, ""):
        raise ValueError(f"Missing color{where}")
    if raw_size in (None, ""):
        raise ValueError(f"Missing size{where}")

    try:
        color = Color.parse(raw_color)
        size = Size.parse(raw_size)
    except ValueError as e:
        raise ValueError(f"{e}{where}") from e

    raw_id = _get_field(row, "id")
    try:
        shirt_id = uuid.UUID(str(raw_id)) if raw_id not in (None, "") else uuid.uuid4()
    except ValueError as e:
        raise ValueError(f"Invalid shirt id {raw_id!r}{where}") from e

    name = str(_get_field(row, "name") or "").strip() or f"{color.value} - {size.value}"

    return Shirt(id=shirt_id, name=name, size=size, color=color)


def shirt_to_dict(shirt: Shirt) -> dict:
    """Serialize a shirt to the same row shape load_catalog reads."""
    return {
        "id": str(shirt.id),
        "name": shirt.name,
        "color": shirt.color.value,
        "size": shirt.size.value,
    }
