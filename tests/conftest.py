import json
from pathlib import Path
from typing import Any, Callable

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="function")
def store_data() -> dict[str, Any]:
    with open(FIXTURES / "store_data.json", "r") as f:
        return json.load(f)


@pytest.fixture(scope="session")
def mapping_file() -> Callable[[str], Path]:
    def _mapping_file(name: str) -> Path:
        return FIXTURES / "mappings" / f"{name}.yml"

    return _mapping_file


@pytest.fixture(scope="function")
def simple_obj() -> dict[str, Any]:
    return {"key0": 0, "key1": 1}


@pytest.fixture(scope="function")
def simple_schema() -> dict[str, Any]:
    return {"objects": [{"name": "foo", "path": "/key0", "default": "bar"}]}
