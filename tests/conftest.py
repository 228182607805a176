from __future__ import annotations

import pytest

from lsif_upload.config import Config
from lsif_upload.log import configure_logging
from lsif_upload.models import UploadContext

DUMP_LINES = [
    b'{"id":1,"type":"vertex","label":"metaData","version":"0.4.0","projectRoot":"file:///repo"}',
    b'{"id":2,"type":"vertex","label":"project","kind":"go"}',
    b'{"id":3,"type":"vertex","label":"document","uri":"file:///repo/main.go"}',
    b'{"id":4,"type":"edge","label":"contains","outV":2,"inVs":[3]}',
]


@pytest.fixture(scope="session", autouse=True)
def _logging() -> None:
    configure_logging(verbose=False)


@pytest.fixture
def dump_bytes() -> bytes:
    return b"\n".join(DUMP_LINES * 500) + b"\n"


@pytest.fixture
def dump_file(tmp_path, dump_bytes):
    path = tmp_path / "dump.lsif"
    path.write_bytes(dump_bytes)
    return path


@pytest.fixture
def config() -> Config:
    return Config(endpoint="https://sourcegraph.example.com", access_token="")


@pytest.fixture
def context(dump_file) -> UploadContext:
    return UploadContext(
        repository="github.com/gorilla/mux",
        commit="a" * 40,
        file=str(dump_file),
        root="",
    )
