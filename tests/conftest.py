import json
from pathlib import Path

import pytest

from netdiagram import config as config_module
from netdiagram.core.schemas import FieldDescriptor, RawVizData


@pytest.fixture(autouse=True)
def restore_settings_cache(monkeypatch):
    """
    Ensure settings are re-read from a clean environment for every test.
    """
    for key in (
        "NETDIAGRAM_LOG_LEVEL",
        "NETDIAGRAM_CANVAS_HEIGHT",
        "NETDIAGRAM_STABILIZATION_ITERATIONS",
        "NETDIAGRAM_STABILIZATION_UPDATE_INTERVAL",
        "NETDIAGRAM_SCALE_EDGES",
        "NETDIAGRAM_VIS_NETWORK_URL",
    ):
        monkeypatch.delenv(key, raising=False)
    config_module.reload_settings()
    yield
    config_module.get_settings.cache_clear()


@pytest.fixture
def country_fields():
    """Value first, then destination, then source (the default layout)."""
    return [
        FieldDescriptor(name="count"),
        FieldDescriptor(name="dst_country"),
        FieldDescriptor(name="src_country"),
    ]


@pytest.fixture
def country_data():
    return {
        "count": [1, 2, 3],
        "dst_country": ["CN", "CN", "US"],
        "src_country": ["US", "US", "CN"],
    }


@pytest.fixture
def country_result(country_fields, country_data):
    return RawVizData(data=country_data, metadata={"fields": country_fields})


@pytest.fixture
def service_map_doc():
    return {
        "checkout": {
            "serviceName": "checkout",
            "id": 5,
            "traceGroups": [{"traceGroup": "HTTP POST /pay", "targetResource": ["payments"]}],
            "targetServices": ["billing-api"],
        },
        "frontend": {
            "serviceName": "frontend",
            "id": 1,
            "traceGroups": [],
            "targetServices": ["checkout"],
        },
    }


@pytest.fixture
def write_json(tmp_path: Path):
    def _write(name: str, document) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
