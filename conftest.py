import pytest

from scicalc import Calculator
from scicalc.storage import JsonFileStorage, MemoryStorage


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def json_storage(tmp_path):
    return JsonFileStorage(tmp_path / "state.json")


@pytest.fixture
def calculator(storage):
    return Calculator(storage)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
