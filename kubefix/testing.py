"""
Helper tools to use kubefix in the pytest-based test suites.

This module is a part of the library's public interface. It is also
a pytest plugin: enable it in the test suite's ``conftest.py`` with::

    pytest_plugins = ['kubefix.testing']
"""
from kubefix._kits.fixtures import NamespaceFactory, dynamic_client, kubefix_settings, \
                                   kubernetes_client, namespace_factory, node_address, \
                                   pytest_runtest_makereport

__all__ = [
    'NamespaceFactory',
    'dynamic_client',
    'kubefix_settings',
    'kubernetes_client',
    'namespace_factory',
    'node_address',
    'pytest_runtest_makereport',
]
