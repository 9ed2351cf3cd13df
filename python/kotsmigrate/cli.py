"""kotsmigrate CLI entry point."""

from __future__ import annotations

from typing import Literal

import rich
import tyro
from rich.panel import Panel

from kotsmigrate.builder import MigrationPodBuilder
from kotsmigrate.image import EnvImageConfig, ImageConfig, StaticImageConfig, image_reference
from kotsmigrate.logging import get_logger
from kotsmigrate.manifest import dump_json, dump_yaml
from kotsmigrate.naming import RandomSuffixToken, UnixTimeToken
from kotsmigrate.options import DeploymentOptions

logger = get_logger(__name__)

app = tyro.extras.SubcommandApp()


def _image_config(registry: str | None, tag: str | None) -> ImageConfig:
    """Environment image configuration with per-invocation overrides."""
    env = EnvImageConfig()
    if registry is None and tag is None:
        return env
    return StaticImageConfig(
        registry=registry if registry is not None else env.registry(),
        tag=tag if tag is not None else env.tag(),
    )


@app.command(name="render")
def render(
    namespace: str,
    restricted_runtime: bool = False,
    registry: str | None = None,
    tag: str | None = None,
    format: Literal["yaml", "json"] = "yaml",
    random_suffix: bool = False,
) -> None:
    """Print the migrations Pod manifest.

    Args:
        namespace: Namespace kotsadm is deployed in.
        restricted_runtime: Leave uid/gid assignment to the cluster (e.g., OpenShift).
        registry: Registry hosting the kotsadm images. Overrides KOTSADM_REGISTRY.
        tag: Tag of the kotsadm images. Overrides KOTSADM_TAG.
        format: Output format.
        random_suffix: Append a random suffix to the Pod name.
    """
    if not namespace.strip():
        rich.print(Panel("Namespace must not be empty.", style="red", expand=False))
        raise SystemExit(1)

    builder = MigrationPodBuilder(
        image_config=_image_config(registry, tag),
        token_provider=RandomSuffixToken() if random_suffix else UnixTimeToken(),
    )
    options = DeploymentOptions(namespace=namespace, is_restricted_runtime=restricted_runtime)
    pod = builder.build(options)
    logger.debug("Built Pod %s for namespace %s", pod.metadata.name, namespace)

    manifest = dump_yaml(pod) if format == "yaml" else dump_json(pod) + "\n"
    print(manifest, end="")


@app.command(name="image")
def image(registry: str | None = None, tag: str | None = None) -> None:
    """Print the migrations image reference.

    Args:
        registry: Registry hosting the kotsadm images. Overrides KOTSADM_REGISTRY.
        tag: Tag of the kotsadm images. Overrides KOTSADM_TAG.
    """
    print(image_reference(_image_config(registry, tag)))


def main() -> None:
    """Main entry point for the kotsmigrate CLI."""
    app.cli(description="Render the kotsadm schema migrations Pod")
