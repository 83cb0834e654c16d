from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.core.errors import InvalidRecordIdError
from api.core.security import require_shared_secret
from api.domain.records import parse_record_id
from api.services.record_service import RecordService

router = APIRouter(prefix="/data", tags=["records"])


def _get_record_service(request: Request) -> RecordService:
    svc = getattr(getattr(request.app, "state", None), "record_service", None)
    if not svc:
        raise RuntimeError("RecordService not configured")
    return svc


def _record_id(record_id: str) -> int:
    # Runs before the credential check: a malformed id is a 400 either way.
    parsed = parse_record_id(record_id)
    if parsed is None:
        raise InvalidRecordIdError(f"Invalid ID {record_id!r}")
    return parsed


@router.get("", dependencies=[Depends(require_shared_secret)])
def list_records(svc: RecordService = Depends(_get_record_service)):
    records = svc.list_records()
    return JSONResponse([record.to_wire() for record in records])


@router.get("/{record_id}")
def get_record(
    ident: int = Depends(_record_id),
    _auth: None = Depends(require_shared_secret),
    svc: RecordService = Depends(_get_record_service),
):
    record = svc.get_record(ident)
    return JSONResponse(record.to_wire())


@router.get("/", include_in_schema=False)
def get_record_without_id():
    # "/data/" carries an empty identifier, which never parses.
    raise InvalidRecordIdError("Empty ID")
