"""Record lookup use cases (list all, get by id)."""

from __future__ import annotations

from typing import List

from api.core.errors import RecordNotFoundError
from api.domain.records import Record
from api.repositories.json_storage import JsonRecordStore


class RecordService:
    """Loads the collection on demand and answers list/get queries."""

    def __init__(self, store: JsonRecordStore) -> None:
        self.store = store

    def list_records(self) -> List[Record]:
        return self.store.load()

    def get_record(self, record_id: int) -> Record:
        for record in self.store.load():
            if record.id == record_id:
                return record
        raise RecordNotFoundError(f"Record {record_id} not found")
