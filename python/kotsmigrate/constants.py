"""Constants used to build the migrations Pod.

Environment variables expected:
- `KOTSADM_REGISTRY`: Registry hosting the kotsadm images (default: "docker.io/kotsadm")
- `KOTSADM_TAG`: Tag of the kotsadm images (default: "latest")

Both are read lazily on first access and cached for the life of the process.
"""

import os
import warnings
from typing import TYPE_CHECKING, Any


def _get_env_warn_default(var_name: str, default: str) -> str:
    """Get environment variable with a warning if not set, returning a default value."""
    try:
        return os.environ[var_name]
    except KeyError:
        warnings.warn(
            f"Environment variable {var_name} not set, using default '{default}'.",
            stacklevel=2,
        )
        return default


# Cache for lazy-loaded constants
_lazy_cache = {}

# Define which constants should be lazily loaded
_LAZY_CONSTANTS = {
    "KOTSADM_REGISTRY": lambda: _get_env_warn_default("KOTSADM_REGISTRY", "docker.io/kotsadm").strip("/"),
    "KOTSADM_TAG": lambda: _get_env_warn_default("KOTSADM_TAG", "latest"),
}


def __getattr__(name: str) -> Any:
    """Module-level __getattr__ for lazy loading of image-related constants."""
    if name in _LAZY_CONSTANTS:
        if name not in _lazy_cache:
            _lazy_cache[name] = _LAZY_CONSTANTS[name]()
        return _lazy_cache[name]
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def clear_cache() -> None:
    """Forget cached environment lookups so the next access reads them again."""
    _lazy_cache.clear()


# Pod identity.
POD_NAME_PREFIX = "kotsadm-migrations"
POD_API_VERSION = "v1"
POD_KIND = "Pod"

# Container image.
IMAGE_NAME = "kotsadm-migrations"
IMAGE_PULL_POLICY = "Always"
RESTART_POLICY = "OnFailure"

# Identity used on platforms that let workloads pick their own uid/gid.
# Matches the uid the kotsadm Postgres image runs as.
RUN_AS_USER = 1001
FS_GROUP = 1001

# SchemaHero configuration.
SCHEMAHERO_DRIVER = "postgres"
SCHEMAHERO_SPEC_FILE = "/tables"
K8S_POSTGRES_SECRET_NAME = "kotsadm-postgres"
K8S_POSTGRES_SECRET_URI_KEY = "uri"

# Resource requests and limits.
RESOURCE_REQUESTS = {"cpu": "20m", "memory": "128Mi"}
RESOURCE_LIMITS = {"cpu": "200m", "memory": "256Mi"}

# Logging.
LOG_LEVEL_ENV_VAR = "KOTSMIGRATE_LOG_LEVEL"

if TYPE_CHECKING:
    KOTSADM_REGISTRY: str
    KOTSADM_TAG: str
