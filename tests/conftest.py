import importlib
import pytest

@pytest.fixture(scope="session")
def logic():
    return importlib.import_module("nvis.logic")

@pytest.fixture
def ctx():
    from nvis.session import Context
    return Context()
