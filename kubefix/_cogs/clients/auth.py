"""
Building the API clients from the kubeconfig credentials.

Every call loads the credentials anew and builds a new client on top of them:
the clients do not share any state with each other or with the client library's
global default configuration (which stays untouched).

All failures here are fatal: a test environment without working credentials
is broken, so :class:`BootstrapError` is raised for the test harness to abort.
"""
import logging
from typing import Optional

import kubernetes.client
import kubernetes.config
import kubernetes.dynamic
import yaml

from kubefix._cogs.clients import errors
from kubefix._cogs.configs import configuration, resolution
from kubefix._cogs.helpers import typedefs
from kubefix._cogs.structs import credentials

logger = logging.getLogger(__name__)


def load_credentials(
        settings: Optional[configuration.FixtureSettings] = None,
) -> credentials.ClusterCredentials:
    settings = settings if settings is not None else configuration.FixtureSettings.from_env()
    path = resolution.resolve_config_path(settings)
    context = settings.cluster.context

    # The client library interprets all the auth-providers & exec-plugins for us.
    # But we load it into our own config object, never into the library's global default.
    config = kubernetes.client.Configuration()
    try:
        kubernetes.config.load_kube_config(
            config_file=path,
            context=context,
            client_configuration=config,
            persist_config=False,
        )
    except (kubernetes.config.ConfigException, OSError, yaml.YAMLError) as e:
        raise errors.BootstrapError(f"Cannot load the cluster credentials from {path!r}.") from e

    logger.debug(f"Credentials are loaded from {path!r} for {config.host!r}.")
    return credentials.ClusterCredentials(path=path, context=context, configuration=config)


def new_typed_client(
        settings: Optional[configuration.FixtureSettings] = None,
) -> typedefs.TypedClient:
    """
    Build a client with typed operations for the core API group (nodes, namespaces, etc).
    """
    creds = load_credentials(settings)
    try:
        api_client = kubernetes.client.ApiClient(creds.configuration)
        return kubernetes.client.CoreV1Api(api_client)
    except Exception as e:
        raise errors.BootstrapError(f"Cannot build a typed client for {creds.server!r}.") from e


def new_dynamic_client(
        settings: Optional[configuration.FixtureSettings] = None,
) -> typedefs.DynamicClient:
    """
    Build a client with schema-agnostic operations for any resource kind.

    Mind that the dynamic client discovers the cluster's API resources
    when created, so it fails here if the cluster is not reachable.
    """
    creds = load_credentials(settings)
    try:
        api_client = kubernetes.client.ApiClient(creds.configuration)
        return kubernetes.dynamic.DynamicClient(api_client)
    except Exception as e:
        raise errors.BootstrapError(f"Cannot build a dynamic client for {creds.server!r}.") from e
