"""
All configuration flags, options, settings to point the fixtures to a cluster.

All settings are grouped semantically just for convenience
(instead of a flat mega-object with all the values in it).

The settings object is constructed once by the test harness (usually via
:meth:`FixtureSettings.from_env`) and is then passed to every resolver,
client factory, and manifest operation explicitly. None of the operations
read the process environment on their own unless no settings are passed.

.. note::

    Some of the settings are optional, some are not
    (but all of them have reasonable defaults).
    An empty string is the same as an absent value: the default is used.
"""
import dataclasses
import os
from typing import Mapping, Optional

KUBECONFIG_ENV = 'KUBE_CONFIG_FILE'
NODE_ADDRESS_ENV = 'NODE_ADDRESS'
CONTEXT_ENV = 'KUBEFIX_CONTEXT'
KUBECTL_ENV = 'KUBEFIX_KUBECTL'


@dataclasses.dataclass
class ClusterSettings:

    kubeconfig: Optional[str] = None
    """
    A path to the kubeconfig file with the cluster credentials.

    If not set, ``~/.kube/config`` of the current user is used.
    Only one file is supported (not a colon-separated list as in ``KUBECONFIG``).
    """

    context: Optional[str] = None
    """
    A kubeconfig context to use instead of the file's current context.
    It is used both for the API clients and for the ``kubectl`` invocations.
    """

    node_address: Optional[str] = None
    """
    An address of a cluster node to use by the tests (e.g. for NodePorts).

    If not set, the address is discovered from the cluster: it is the first
    address of the first node as listed by the API, regardless of its type.
    Set it explicitly when a specific node or address type is needed.
    """


@dataclasses.dataclass
class ToolSettings:

    kubectl: str = 'kubectl'
    """
    The ``kubectl`` binary to use for applying & deleting the manifests:
    either a name to be looked up in ``PATH``, or a full path.
    """

    shell: str = '/bin/sh'
    """
    The shell to interpret the commands of :func:`kubefix.run_shell`.
    It is invoked as ``<shell> -c <command>``.
    """


@dataclasses.dataclass
class FixtureSettings:
    cluster: ClusterSettings = dataclasses.field(default_factory=ClusterSettings)
    tools: ToolSettings = dataclasses.field(default_factory=ToolSettings)

    @classmethod
    def from_env(
            cls,
            environ: Optional[Mapping[str, str]] = None,
    ) -> "FixtureSettings":
        """
        Build the settings from the environment variables (``os.environ`` by default).

        The environment overrides the defaults only when the values are non-empty.
        """
        environ = os.environ if environ is None else environ
        return cls(
            cluster=ClusterSettings(
                kubeconfig=environ.get(KUBECONFIG_ENV) or None,
                context=environ.get(CONTEXT_ENV) or None,
                node_address=environ.get(NODE_ADDRESS_ENV) or None,
            ),
            tools=ToolSettings(
                kubectl=environ.get(KUBECTL_ENV) or ToolSettings.kubectl,
            ),
        )
