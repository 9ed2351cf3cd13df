"""Deployment options consumed by the migrations Pod builder."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DeploymentOptions(BaseModel):
    """Options describing where and how kotsadm is deployed.

    Attributes:
        namespace: Namespace the migrations Pod is created in. Not checked here;
            an empty or missing namespace is rejected by the API server on submit.
        is_restricted_runtime: Whether the cluster assigns uid/gid itself
            (e.g., OpenShift). Such clusters reject Pods that pin them.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str
    is_restricted_runtime: bool = False
