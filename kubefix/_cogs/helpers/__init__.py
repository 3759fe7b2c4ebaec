"""
General-purpose helpers not related to the cluster itself
(neither to the clients nor to the engines nor to the structs),
which are used to prepare the manifests and the runtime environment.

Helpers do not depend on anything else in the library. For most cases,
they do not even implement any entities or behaviours of the domain
of test fixtures, but rather some unrelated low-level patterns.
"""
