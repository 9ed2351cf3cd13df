"""Builder for the Pod that runs SchemaHero migrations."""

from __future__ import annotations

import kubernetes_asyncio.client as kclient

from kotsmigrate import constants
from kotsmigrate.image import EnvImageConfig, ImageConfig, image_reference
from kotsmigrate.naming import TokenProvider, UnixTimeToken, pod_name
from kotsmigrate.options import DeploymentOptions


class MigrationPodBuilder:
    """Builds the migrations Pod from deployment options.

    The builder holds no per-call state. Each call to `build` reads one token
    and the image configuration and returns a new `V1Pod`; it performs no I/O
    and does not validate the namespace.
    """

    def __init__(
        self,
        image_config: ImageConfig | None = None,
        token_provider: TokenProvider | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            image_config: Source of the image registry and tag. Defaults to the
                `KOTSADM_REGISTRY` and `KOTSADM_TAG` environment variables.
            token_provider: Source of the Pod name suffix. Defaults to the
                current Unix time in seconds.
        """
        self.image_config = image_config or EnvImageConfig()
        self.token_provider = token_provider or UnixTimeToken()

    def build(self, options: DeploymentOptions) -> kclient.V1Pod:
        """Build the migrations Pod.

        Args:
            options: Target namespace and runtime flavor.
        """
        name = pod_name(self.token_provider())
        return kclient.V1Pod(
            api_version=constants.POD_API_VERSION,
            kind=constants.POD_KIND,
            metadata=kclient.V1ObjectMeta(
                name=name,
                namespace=options.namespace,
            ),
            spec=kclient.V1PodSpec(
                security_context=self.get_security_context(options),
                restart_policy=constants.RESTART_POLICY,
                containers=[
                    kclient.V1Container(
                        name=name,
                        image=image_reference(self.image_config),
                        image_pull_policy=constants.IMAGE_PULL_POLICY,
                        env=self.get_envs(),
                        resources=self.get_resources(),
                    )
                ],
            ),
        )

    @staticmethod
    def get_security_context(options: DeploymentOptions) -> kclient.V1PodSecurityContext | None:
        """Get the Pod security context, or None on restricted runtimes.

        Restricted runtimes assign uid and gid from the namespace's range and
        refuse Pods that request fixed ones, so the field is left out entirely.
        """
        if options.is_restricted_runtime:
            return None
        return kclient.V1PodSecurityContext(
            run_as_user=constants.RUN_AS_USER,
            fs_group=constants.FS_GROUP,
        )

    @staticmethod
    def get_envs() -> list[kclient.V1EnvVar]:
        """Get the environment variables for the migrations container.

        The database URI is never read here; the kubelet resolves it from the
        Postgres secret when the container starts.
        """
        return [
            kclient.V1EnvVar(name="SCHEMAHERO_DRIVER", value=constants.SCHEMAHERO_DRIVER),
            kclient.V1EnvVar(name="SCHEMAHERO_SPEC_FILE", value=constants.SCHEMAHERO_SPEC_FILE),
            kclient.V1EnvVar(
                name="SCHEMAHERO_URI",
                value_from=kclient.V1EnvVarSource(
                    secret_key_ref=kclient.V1SecretKeySelector(
                        name=constants.K8S_POSTGRES_SECRET_NAME,
                        key=constants.K8S_POSTGRES_SECRET_URI_KEY,
                    ),
                ),
            ),
        ]

    @staticmethod
    def get_resources() -> kclient.V1ResourceRequirements:
        """Get the resource requests and limits for the migrations container."""
        return kclient.V1ResourceRequirements(
            requests=dict(constants.RESOURCE_REQUESTS),
            limits=dict(constants.RESOURCE_LIMITS),
        )


def migrations_pod(
    options: DeploymentOptions,
    image_config: ImageConfig | None = None,
    token_provider: TokenProvider | None = None,
) -> kclient.V1Pod:
    """Build the migrations Pod with a one-off builder."""
    return MigrationPodBuilder(image_config, token_provider).build(options)
