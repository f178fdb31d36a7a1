import json
from pathlib import Path

import pytest

from api_dump_to_code.pipeline import ApiDumpParser, GeneratorConfig

TEST_DATA = Path(__file__).parent / "test_data"


def load_test_json(name):
    with open(TEST_DATA / name, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def mini_dump():
    return ApiDumpParser().parse(load_test_json("mini_api_dump.json"))


@pytest.fixture
def mini_docs():
    return ApiDumpParser().parse_docs(load_test_json("api_docs.json"))


@pytest.fixture
def config():
    return GeneratorConfig()
