"""
Authentication-related structures.

kubefix does not implement any authentication on its own. Instead,
it lets the official client library interpret the kubeconfig file
(including all the complex auth-providers and exec-plugins),
and keeps the resulting client configuration for building the clients.

The credentials are loaded anew for every client: they are never cached,
shared, or modified after they are loaded.

.. seealso::
    :func:`kubefix.load_credentials`.
"""
import dataclasses
from typing import Optional

import kubernetes.client


@dataclasses.dataclass(frozen=True)
class ClusterCredentials:
    """
    A single endpoint with specific credentials and connection flags to use.
    """
    path: str  # the kubeconfig file it was loaded from
    context: Optional[str]  # None for the file's current context
    configuration: kubernetes.client.Configuration = dataclasses.field(compare=False, repr=False)

    @property
    def server(self) -> str:
        return str(self.configuration.host)  # e.g. "https://localhost:6443"
