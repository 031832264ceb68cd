import gc

import pytest

from lyu import init


@pytest.fixture(autouse=True)
def clear_registry():
    # Collect garbage first so that proxies of earlier tests
    # have dereferenced themselves before the registry is emptied.
    gc.collect()
    init()
