"""
Resolution of the local configuration: explicit settings first, defaults second.

Only the local-only resolution is here. The node address, which might need
an API call to the cluster, is resolved in :mod:`kubefix._cogs.clients.nodes`.
"""
import os.path
from typing import Optional

from kubefix._cogs.configs import configuration

DEFAULT_KUBECONFIG = os.path.join('~', '.kube', 'config')


def resolve_config_path(
        settings: Optional[configuration.FixtureSettings] = None,
) -> str:
    """
    Get the path to the kubeconfig file: as overridden, or the user's default one.

    The file is neither checked for existence nor read here.
    """
    settings = settings if settings is not None else configuration.FixtureSettings.from_env()
    if settings.cluster.kubeconfig:
        return settings.cluster.kubeconfig
    return os.path.expanduser(DEFAULT_KUBECONFIG)
