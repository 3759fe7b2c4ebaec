"""
Discovery of a node address to reach the services exposed by the tests.

The policy is "best effort, no load-balancing": the first address
of the first node, exactly as the API lists them. No address type
(InternalIP, ExternalIP, Hostname) is preferred over another.
If a specific node is needed, it must be configured explicitly.
"""
import logging
from typing import Optional

import kubernetes.client
import urllib3.exceptions

from kubefix._cogs.clients import auth, errors
from kubefix._cogs.configs import configuration
from kubefix._cogs.helpers import typedefs

logger = logging.getLogger(__name__)


def resolve_node_address(
        settings: Optional[configuration.FixtureSettings] = None,
        *,
        client: Optional[typedefs.TypedClient] = None,
) -> str:
    settings = settings if settings is not None else configuration.FixtureSettings.from_env()
    if settings.cluster.node_address:
        return settings.cluster.node_address

    client = client if client is not None else auth.new_typed_client(settings)
    try:
        nodes = client.list_node()
    except (kubernetes.client.ApiException, urllib3.exceptions.HTTPError) as e:
        raise errors.ClusterUnreachable("Cannot list the nodes of the cluster.") from e

    if not nodes.items:
        raise errors.ClusterUnreachable("No nodes are listed in the cluster.")

    node = nodes.items[0]
    addresses = node.status.addresses if node.status is not None else None
    if not addresses:
        name = node.metadata.name if node.metadata is not None else None
        raise errors.ClusterUnreachable(f"No addresses are reported for the node {name!r}.")

    address: str = addresses[0].address
    logger.debug(f"Node address is discovered: {address!r} ({addresses[0].type}).")
    return address
