import kubernetes.client
import pytest

from kubefix._cogs.clients.errors import ProvisioningError
from kubefix.testing import NamespaceFactory


@pytest.fixture()
def suite(pytester):
    pytester.makeconftest("pytest_plugins = ['kubefix.testing']")
    return pytester


def test_fatal_error_stops_the_session(suite):
    suite.makepyfile("""
        import kubefix

        def test_broken():
            raise kubefix.ClusterUnreachable("No nodes in the cluster.")

        def test_never_reached():
            pass
    """)
    result = suite.runpytest()
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(["*The test environment is broken: No nodes in the cluster.*"])


def test_regular_failure_does_not_stop_the_session(suite):
    suite.makepyfile("""
        def test_failing():
            assert False

        def test_passing():
            pass
    """)
    result = suite.runpytest()
    result.assert_outcomes(failed=1, passed=1)


def test_fatal_error_in_fixture_stops_the_session(suite):
    suite.makepyfile("""
        import pytest
        import kubefix

        @pytest.fixture()
        def cluster():
            raise kubefix.BootstrapError("Cannot load the credentials.")

        def test_broken(cluster):
            pass

        def test_never_reached():
            pass
    """)
    result = suite.runpytest()
    result.assert_outcomes(errors=1)


def test_settings_fixture_reads_the_environment(suite, monkeypatch):
    monkeypatch.setenv('NODE_ADDRESS', '10.0.0.9')
    monkeypatch.setenv('KUBEFIX_KUBECTL', '/opt/kubectl')
    suite.makepyfile("""
        def test_settings(kubefix_settings):
            assert kubefix_settings.cluster.node_address == '10.0.0.9'
            assert kubefix_settings.tools.kubectl == '/opt/kubectl'

        def test_node_address(node_address):
            assert node_address == '10.0.0.9'
    """)
    result = suite.runpytest()
    result.assert_outcomes(passed=2)


def test_broken_kubeconfig_stops_the_session(suite, monkeypatch, tmp_path):
    monkeypatch.setenv('KUBE_CONFIG_FILE', str(tmp_path / 'absent'))
    suite.makepyfile("""
        def test_client(kubernetes_client):
            pass

        def test_never_reached():
            pass
    """)
    result = suite.runpytest()
    result.assert_outcomes(errors=1)


def test_factory_generates_unique_names(typed_client):
    typed_client.create_namespace.side_effect = lambda body: body
    factory = NamespaceFactory(typed_client)
    ns1 = factory()
    ns2 = factory()
    assert ns1.metadata.name.startswith('kubefix-')
    assert ns2.metadata.name.startswith('kubefix-')
    assert ns1.metadata.name != ns2.metadata.name
    assert factory.names == [ns1.metadata.name, ns2.metadata.name]


def test_factory_with_explicit_name_and_prefix(typed_client):
    typed_client.create_namespace.side_effect = lambda body: body
    factory = NamespaceFactory(typed_client, prefix='e2e-')
    assert factory('fixed').metadata.name == 'fixed'
    assert factory().metadata.name.startswith('e2e-')
    assert factory.names[0] == 'fixed'


def test_factory_does_not_remember_the_failures(typed_client):
    typed_client.create_namespace.side_effect = kubernetes.client.ApiException(status=409)
    factory = NamespaceFactory(typed_client)
    with pytest.raises(ProvisioningError):
        factory('taken')
    assert factory.names == []
