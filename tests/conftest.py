from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Garante que o pacote api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from api.app import create_app  # noqa: E402
from api.core.config import Settings  # noqa: E402

SECRET = "s3cret"

RECORDS = [
    {
        "id": 1,
        "jpg": "https://img.test/1.jpg",
        "name": "Mustermann",
        "vorname": "Max",
        "adresse": "Musterstrasse 1",
        "pan_card_number": "ABCDE1234F",
        "expiration_date": "2027-12-31",
    },
    {
        "id": 2,
        "jpg": "/img/2.png",
        "name": "Müller",
        "vorname": "Jürgen",
        "adresse": "Hauptstraße 5",
        "pan_card_number": "FGHIJ5678K",
        "expiration_date": "2026-06-30",
    },
]


@pytest.fixture()
def records_file(tmp_path):
    """Arquivo JSON temporário com os registros 1 e 2."""
    path = tmp_path / "user.json"
    path.write_text(json.dumps(RECORDS, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture()
def settings(records_file):
    return Settings(
        app_env="test",
        records_file=records_file,
        shared_secret=SECRET,
        auth_header="Authorization",
        log_level="INFO",
        host="127.0.0.1",
        port=8080,
    )


@pytest.fixture()
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture()
def auth():
    return {"Authorization": SECRET}
