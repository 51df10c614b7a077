"""Reading query results and service maps from JSON documents."""

import json
from pathlib import Path
from typing import Any, Dict

from pydantic import TypeAdapter, ValidationError

from netdiagram.core.errors import InputError
from netdiagram.core.schemas import RawVizData, ServiceEntry, ServiceObject

_service_map_adapter = TypeAdapter(Dict[str, ServiceEntry])


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InputError(f"{path} is not valid JSON: {e}") from e


def parse_viz_data(document: Any) -> RawVizData:
    """Validate a query result document.

    Accepts the bare envelope ({"data", "metadata", "jsonData"}) or one wrapped
    in a "rawVizData" key.
    """
    if isinstance(document, dict) and "rawVizData" in document:
        document = document["rawVizData"]
    try:
        return RawVizData.model_validate(document)
    except ValidationError as e:
        raise InputError(f"Invalid query result: {e}") from e


def parse_service_map(document: Any) -> ServiceObject:
    try:
        return _service_map_adapter.validate_python(document)
    except ValidationError as e:
        raise InputError(f"Invalid service map: {e}") from e


def load_viz_data(path: Path) -> RawVizData:
    return parse_viz_data(_read_json(path))


def load_service_map(path: Path) -> ServiceObject:
    return parse_service_map(_read_json(path))
