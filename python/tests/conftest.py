from __future__ import annotations

import pytest

from kotsmigrate import constants
from kotsmigrate.builder import MigrationPodBuilder
from kotsmigrate.image import StaticImageConfig
from kotsmigrate.naming import SequentialToken


@pytest.fixture(autouse=True)
def fresh_constants():
    """Make every test read image configuration from the environment again."""
    constants.clear_cache()
    yield
    constants.clear_cache()


@pytest.fixture
def image_config() -> StaticImageConfig:
    """Fixture providing a fixed registry and tag."""
    return StaticImageConfig(registry="registry.example.com", tag="v1.2.3")


@pytest.fixture
def builder(image_config: StaticImageConfig) -> MigrationPodBuilder:
    """Fixture providing a builder with deterministic names."""
    return MigrationPodBuilder(image_config=image_config, token_provider=SequentialToken(start=1700000000))
