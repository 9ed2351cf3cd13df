"""Serialize Kubernetes models into the manifests the API server accepts."""

from __future__ import annotations

import datetime
import json
from decimal import Decimal
from typing import Any

import kubernetes_asyncio.client as kclient
import yaml
from kubernetes.utils import parse_quantity

_PRIMITIVES = (str, int, float, bool, bytes)


def to_manifest(obj: Any) -> Any:
    """Convert a Kubernetes model into plain data with camelCase keys.

    Fields that are None are left out, so an unset field is absent from the
    manifest rather than sent as null.
    """
    if obj is None or isinstance(obj, _PRIMITIVES):
        return obj
    if isinstance(obj, (list, tuple)):
        return [to_manifest(item) for item in obj]
    if isinstance(obj, dict):
        return {key: to_manifest(value) for key, value in obj.items()}
    if isinstance(obj, (datetime.datetime, datetime.date)):
        return obj.isoformat()
    if not hasattr(obj, "openapi_types"):
        raise TypeError(f"Cannot serialize object of type {type(obj).__name__}")

    manifest = {}
    for attr in obj.openapi_types:
        value = getattr(obj, attr)
        if value is None:
            continue
        manifest[obj.attribute_map[attr]] = to_manifest(value)
    return manifest


def dump_yaml(pod: kclient.V1Pod) -> str:
    """Render the Pod as a YAML document, keeping field order."""
    return yaml.safe_dump(to_manifest(pod), sort_keys=False)


def dump_json(pod: kclient.V1Pod, indent: int | None = 2) -> str:
    """Render the Pod as a JSON document."""
    return json.dumps(to_manifest(pod), indent=indent)


def requests_within_limits(resources: kclient.V1ResourceRequirements) -> bool:
    """Check that every requested resource that has a limit stays under it.

    Raises:
        ValueError: If a quantity cannot be parsed.
    """
    requests: dict[str, str] = resources.requests or {}
    limits: dict[str, str] = resources.limits or {}
    for resource, request in requests.items():
        if resource not in limits:
            continue
        if Decimal(parse_quantity(request)) > Decimal(parse_quantity(limits[resource])):
            return False
    return True
