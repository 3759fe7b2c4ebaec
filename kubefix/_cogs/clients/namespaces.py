"""
Throwaway namespaces for the isolation of the tests.

The namespaces are only created here. They are marked with a label,
so that the leftovers can be found & cleaned up by the test harness
(e.g. ``kubectl delete namespace -l laf.dev/testing=testing``).
"""
import logging
from typing import Mapping

import kubernetes.client
import urllib3.exceptions

from kubefix._cogs.clients import errors
from kubefix._cogs.helpers import typedefs

logger = logging.getLogger(__name__)

TESTING_LABELS: Mapping[str, str] = {'laf.dev/testing': 'testing'}


def create_namespace(
        client: typedefs.TypedClient,
        name: str,
) -> kubernetes.client.V1Namespace:
    """
    Create a labeled namespace and return it as stored by the server.

    The name is not checked for uniqueness: the server rejects duplicates.
    """
    body = kubernetes.client.V1Namespace(
        metadata=kubernetes.client.V1ObjectMeta(
            name=name,
            labels=dict(TESTING_LABELS),
        ),
    )
    try:
        namespace: kubernetes.client.V1Namespace = client.create_namespace(body)
    except (kubernetes.client.ApiException, urllib3.exceptions.HTTPError) as e:
        raise errors.ProvisioningError(f"Cannot create the namespace {name!r}.") from e

    logger.debug(f"Namespace {name!r} is created.")
    return namespace
