"""Where the migrations image comes from."""

from __future__ import annotations

from typing import Protocol

from kotsmigrate import constants


class ImageConfig(Protocol):
    """Source of the registry and tag of the kotsadm images."""

    def registry(self) -> str:
        """Registry hosting the images, without a trailing slash."""
        ...

    def tag(self) -> str:
        """Tag shared by the kotsadm images."""
        ...


class EnvImageConfig:
    """Image configuration read from `KOTSADM_REGISTRY` and `KOTSADM_TAG`."""

    def registry(self) -> str:
        """Registry from the environment."""
        return constants.KOTSADM_REGISTRY

    def tag(self) -> str:
        """Tag from the environment."""
        return constants.KOTSADM_TAG


class StaticImageConfig:
    """Image configuration with fixed values."""

    def __init__(self, registry: str, tag: str) -> None:
        """Initialize with an explicit registry and tag."""
        self._registry = registry.strip("/")
        self._tag = tag

    def __repr__(self) -> str:
        """Represent the image configuration as a string."""
        return f"StaticImageConfig(registry={self._registry}, tag={self._tag})"

    def registry(self) -> str:
        """The fixed registry."""
        return self._registry

    def tag(self) -> str:
        """The fixed tag."""
        return self._tag


def image_reference(config: ImageConfig) -> str:
    """Full reference of the migrations image, e.g. `docker.io/kotsadm/kotsadm-migrations:latest`."""
    return f"{config.registry()}/{constants.IMAGE_NAME}:{config.tag()}"
