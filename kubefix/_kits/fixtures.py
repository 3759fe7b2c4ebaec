import uuid
from typing import Iterator, List, Optional

import kubernetes.client
import pytest

from kubefix._cogs.clients import auth, errors, namespaces, nodes
from kubefix._cogs.configs import configuration
from kubefix._cogs.helpers import typedefs


class NamespaceFactory:
    """
    A creator of the throwaway namespaces for the tests.

    Usage::

        def test_me(namespace_factory):
            ns = namespace_factory()  # a unique name, e.g. "kubefix-3f2a9c1d"
            ns = namespace_factory('my-test-ns')
            ...

    The created namespaces are remembered in ``names``, but are not deleted:
    the cleanup policy belongs to the test suite (e.g. by the testing label).
    """
    names: List[str]

    def __init__(
            self,
            client: typedefs.TypedClient,
            *,
            prefix: str = 'kubefix-',
    ) -> None:
        super().__init__()
        self.client = client
        self.prefix = prefix
        self.names = []

    def __call__(self, name: Optional[str] = None) -> kubernetes.client.V1Namespace:
        name = name if name is not None else f'{self.prefix}{uuid.uuid4().hex[:8]}'
        namespace = namespaces.create_namespace(self.client, name)
        self.names.append(name)
        return namespace


@pytest.fixture()
def kubefix_settings() -> configuration.FixtureSettings:
    return configuration.FixtureSettings.from_env()


@pytest.fixture()
def kubernetes_client(kubefix_settings: configuration.FixtureSettings) -> typedefs.TypedClient:
    return auth.new_typed_client(kubefix_settings)


@pytest.fixture()
def dynamic_client(kubefix_settings: configuration.FixtureSettings) -> typedefs.DynamicClient:
    return auth.new_dynamic_client(kubefix_settings)


@pytest.fixture()
def node_address(kubefix_settings: configuration.FixtureSettings) -> str:
    return nodes.resolve_node_address(kubefix_settings)


@pytest.fixture()
def namespace_factory(kubernetes_client: typedefs.TypedClient) -> NamespaceFactory:
    return NamespaceFactory(kubernetes_client)


# A broken environment fails all the tests the same way: there is no point to continue.
# The same mechanism as with `pytest -x`: the session stops after the current test.
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: "pytest.CallInfo[None]") -> Iterator[None]:
    yield
    if call.excinfo is not None and call.excinfo.errisinstance(errors.FatalError):
        item.session.shouldstop = f"The test environment is broken: {call.excinfo.value}"
