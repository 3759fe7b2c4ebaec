"""
Errors of the cluster-related preparations.

All of them are fatal: they mean that the test environment is broken
(no credentials, no cluster, no permissions), so there is no point
in running the tests any further. The test harness is expected to abort
the whole run when it sees any of them (see :mod:`kubefix.testing`).

The underlying errors of the client library (``kubernetes``, ``urllib3``)
are chained as the causes of our own errors -- for better explainability
of errors in the stack traces.

The failures of the external processes (e.g. ``kubectl``) are not here:
they are not fatal, and are returned to the callers as values instead
(see :class:`kubefix.ExecutionResult`).
"""


class FatalError(Exception):
    """ A broken prerequisite of the test environment; the run must be aborted. """


class BootstrapError(FatalError):
    """ Raised when the credentials cannot be loaded or the clients cannot be built. """


class ClusterUnreachable(FatalError):
    """ Raised when no node address can be found in the cluster. """


class ProvisioningError(FatalError):
    """ Raised when the fixture resources cannot be created in the cluster. """
