"""
The main kubefix module for all the exported functions & classes.
"""
# isort: skip_file

# Unlike all other places, where we import other modules and refer
# the functions via the modules, this is the library's top-level interface,
# as it is seen by the test suites. So, we export the individual functions.

from kubefix._cogs.configs.configuration import (
    FixtureSettings,
    ClusterSettings,
    ToolSettings,
)
from kubefix._cogs.configs.resolution import (
    resolve_config_path,
)
from kubefix._cogs.clients.errors import (
    FatalError,
    BootstrapError,
    ClusterUnreachable,
    ProvisioningError,
)
from kubefix._cogs.clients.auth import (
    load_credentials,
    new_typed_client,
    new_dynamic_client,
)
from kubefix._cogs.clients.nodes import (
    resolve_node_address,
)
from kubefix._cogs.clients.namespaces import (
    TESTING_LABELS,
    create_namespace,
)
from kubefix._cogs.helpers.typedefs import (
    DynamicClient,
    TemplateParameters,
    TypedClient,
)
from kubefix._cogs.helpers.templates import (
    render,
)
from kubefix._cogs.helpers.versions import (
    version as __version__,
)
from kubefix._cogs.structs.credentials import (
    ClusterCredentials,
)
from kubefix._core.actions.loggers import (
    LogFormat,
    configure,
)
from kubefix._core.engines.executing import (
    ExecutionError,
    ExecutionResult,
    run_command,
    run_shell,
)
from kubefix._core.engines.manifests import (
    apply,
    delete,
    apply_from_template,
    delete_from_template,
)

__all__ = [
    'FixtureSettings',
    'ClusterSettings',
    'ToolSettings',
    'resolve_config_path',
    'resolve_node_address',
    'FatalError',
    'BootstrapError',
    'ClusterUnreachable',
    'ProvisioningError',
    'ClusterCredentials',
    'load_credentials',
    'new_typed_client',
    'new_dynamic_client',
    'TypedClient',
    'DynamicClient',
    'TemplateParameters',
    'TESTING_LABELS',
    'create_namespace',
    'render',
    'LogFormat',
    'configure',
    'ExecutionError',
    'ExecutionResult',
    'run_command',
    'run_shell',
    'apply',
    'delete',
    'apply_from_template',
    'delete_from_template',
]
