import dataclasses
import logging
import os
import stat
import textwrap
from unittest.mock import Mock

import kubernetes.client
import pytest

from kubefix._cogs.configs import configuration
from kubefix._core.actions.loggers import CommandFormatter

pytest_plugins = ['pytester']

KUBECONFIG = """
apiVersion: v1
kind: Config
current-context: self
clusters:
  - name: self
    cluster:
      server: https://fake-host:6443
      insecure-skip-tls-verify: true
  - name: other
    cluster:
      server: https://other-host:6443
      insecure-skip-tls-verify: true
contexts:
  - name: self
    context: {cluster: self, user: self}
  - name: other
    context: {cluster: other, user: self}
users:
  - name: self
    user: {token: fake-token}
"""

# The fake kubectl prints its arguments and echoes the manifest from stdin.
FAKE_KUBECTL = """\
#!/bin/sh
echo "args: $*"
cat
"""

# The failing kubectl reads the manifest and complains to stderr, as the real one does.
FAILING_KUBECTL = """\
#!/bin/sh
cat >/dev/null
echo "regular output"
echo "error: unable to recognize STDIN" >&2
exit 3
"""


#
# The unit-tests must be fully isolated from the environment:
# neither the developer's cluster nor the CI's variables must leak in.
#

@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    for name in [configuration.KUBECONFIG_ENV, configuration.NODE_ADDRESS_ENV,
                 configuration.CONTEXT_ENV, configuration.KUBECTL_ENV]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _clear_own_handlers():
    logger = logging.getLogger()
    original_level = logger.level
    original_handlers = [
        handler for handler in logger.handlers
        if not isinstance(handler.formatter, CommandFormatter)
    ]
    yield
    logger.handlers[:] = original_handlers
    logger.setLevel(original_level)


@pytest.fixture()
def settings():
    return configuration.FixtureSettings()


@pytest.fixture()
def kubeconfig(tmp_path):
    path = tmp_path / 'kubeconfig'
    path.write_text(textwrap.dedent(KUBECONFIG).lstrip())
    return str(path)


@pytest.fixture()
def kubeconfig_settings(settings, kubeconfig):
    return dataclasses.replace(settings, cluster=dataclasses.replace(settings.cluster, kubeconfig=kubeconfig))


def _make_script(path, content):
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)


@pytest.fixture()
def fake_kubectl(tmp_path):
    return _make_script(tmp_path / 'kubectl', FAKE_KUBECTL)


@pytest.fixture()
def failing_kubectl(tmp_path):
    return _make_script(tmp_path / 'kubectl-failing', FAILING_KUBECTL)


#
# Mocks for Kubernetes API clients. We do not test the client library,
# we test the layers on top of it, so everything is assumed to be functional.
#

@pytest.fixture()
def typed_client():
    return Mock(spec=kubernetes.client.CoreV1Api)


@pytest.fixture()
def make_node():
    def factory(name, *addresses):
        return kubernetes.client.V1Node(
            metadata=kubernetes.client.V1ObjectMeta(name=name),
            status=kubernetes.client.V1NodeStatus(addresses=[
                kubernetes.client.V1NodeAddress(type=type_, address=address)
                for type_, address in addresses
            ]),
        )
    return factory


@pytest.fixture()
def home(monkeypatch, tmp_path):
    path = tmp_path / 'home'
    monkeypatch.setenv('HOME', str(path))
    return str(path)


@pytest.fixture()
def expected_default_kubeconfig(home):
    return os.path.join(home, '.kube', 'config')
