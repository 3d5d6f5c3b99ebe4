"""
Domain models: Pydantic types for contract synthesis.

All models are re-exported here for convenient access:

    from contractgen.core.models import CapabilityModel, MethodEntry, OverridePolicy
"""

from contractgen.core.models.capability import CapabilityModel, ClientContextParam
from contractgen.core.models.method import (
    BuilderContract,
    MethodEntry,
    OverridePolicy,
    Parameter,
)
from contractgen.core.models.service import (
    Customization,
    HttpChecksum,
    Operation,
    ServiceDefinition,
    ServiceInfo,
)

__all__ = [
    # method.py
    "BuilderContract",
    # capability.py
    "CapabilityModel",
    "ClientContextParam",
    # service.py
    "Customization",
    "HttpChecksum",
    "MethodEntry",
    "Operation",
    "OverridePolicy",
    "Parameter",
    "ServiceDefinition",
    "ServiceInfo",
]
