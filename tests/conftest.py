import pytest

from vec3.config import Vec3Config, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default config and a fresh random source."""
    set_config(Vec3Config())
    yield
    set_config(None)
