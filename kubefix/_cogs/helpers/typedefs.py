"""
Rudimentary type [re-]definitions for the clients & values used across the codebase.

The client libraries are generated and have no common base classes,
so we only name the specific classes as our public "typed" & "dynamic" clients.
"""
from typing import Mapping

import kubernetes.client
import kubernetes.dynamic

TypedClient = kubernetes.client.CoreV1Api
DynamicClient = kubernetes.dynamic.DynamicClient

# Placeholder names to their values. Not all placeholders must be covered.
TemplateParameters = Mapping[str, str]
