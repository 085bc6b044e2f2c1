import pytest

from db import init_db
from viewmodel import MainViewModel, ProductRepository


@pytest.fixture
def config(tmp_path):
    return {
        "DB_BACKEND": "sqlite",
        "DB_PATH": str(tmp_path / "data" / "products.db"),
    }


@pytest.fixture
def store(config):
    init_db(config)
    return config


@pytest.fixture
def viewmodel(store):
    vm = MainViewModel(ProductRepository(store))
    vm.wait_idle()
    yield vm
    vm.close()
