import importlib
import pkgutil

import pytest

import frontdesk


def _modules():
    for info in pkgutil.walk_packages(frontdesk.__path__, prefix="frontdesk."):
        yield info.name


@pytest.mark.parametrize("name", sorted(_modules()))
def test_module_imports(name):
    assert importlib.import_module(name) is not None
