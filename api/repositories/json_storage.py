"""
JSON file persistence adapter for person records.

The whole file is read and validated on every call to ``load``; nothing is
cached between requests, so edits to the file are visible immediately.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from api.core.errors import StoreError
from api.domain.records import Record

logger = logging.getLogger(__name__)

_RECORD_LIST = TypeAdapter(List[Record])


class JsonRecordStore:
    """Read-only view over a JSON array of records on local disk."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> List[Record]:
        """Read and parse the full collection, in file order."""
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            logger.error("Cannot read %s: %s", self.path, exc)
            raise StoreError(f"cannot read {self.path}") from exc
        try:
            return _RECORD_LIST.validate_json(raw)
        except ValidationError as exc:
            logger.error("Invalid content in %s: %s", self.path, exc)
            raise StoreError(f"cannot parse {self.path}") from exc
