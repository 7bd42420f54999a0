"""Pytest configuration and fixtures"""
import pytest

from cart_store.core.config import Settings
from cart_store.core.store import CartStore
from cart_store.storage import InMemoryKeyValueStore


@pytest.fixture
def storage():
    """Empty in-memory key-value store"""
    return InMemoryKeyValueStore()


@pytest.fixture
def store(storage):
    """Cart store without retry delays"""
    return CartStore(storage, persist_backoff_initial=0)


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the environment"""
    return Settings(
        _env_file=None,
        storage_backend="memory",
        storage_path=str(tmp_path / "cart.json"),
        persist_backoff_initial=0,
    )


@pytest.fixture
def sample_product():
    """Sample product descriptor"""
    return {
        "id": "A",
        "title": "T",
        "image_url": "u",
        "price": 10,
    }


@pytest.fixture
def other_product():
    """Second product descriptor"""
    return {
        "id": "B",
        "title": "Wireless Mouse",
        "image_url": "https://cdn.example.com/mouse.png",
        "price": 24.5,
    }
