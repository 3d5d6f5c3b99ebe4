"""
Capability derivation: reduce a service definition to capability flags.

Operations are scanned exactly once here; the resulting flags are stored
on the CapabilityModel so synthesis never re-walks the operations.
"""

from __future__ import annotations

import logging

from contractgen.core.models.capability import CapabilityModel
from contractgen.core.models.service import Operation, ServiceDefinition
from contractgen.core.services.generators.account_id import ACCOUNT_ID_ENDPOINT_MODE_BUILTIN

logger = logging.getLogger(__name__)

# Auth scheme spellings accepted in service.yml (short form and shape id)
BEARER_AUTH = frozenset({"bearer", "smithy.api#httpBearerAuth"})
SIGV4A_AUTH = frozenset({"sigv4a", "aws.auth#sigv4a"})


def _uses_any(schemes: list[str], accepted: frozenset[str]) -> bool:
    return any(s in accepted for s in schemes)


def _requests_checksum(op: Operation) -> bool:
    return op.http_checksum is not None and op.http_checksum.request_algorithm_member is not None


def _validates_checksum(op: Operation) -> bool:
    return op.http_checksum is not None and op.http_checksum.response_algorithms is not None


def derive_capabilities(definition: ServiceDefinition) -> CapabilityModel:
    """Build the capability model for a service definition.

    Derived flags:
        uses_bearer_auth                  service or any operation uses bearer auth
        supports_sigv4a_region_set        service or any operation uses SigV4a
        has_request_checksum_capability   any operation names a request algorithm member
        has_response_checksum_capability  any operation lists response algorithms
        supports_account_id_endpoint_mode the endpoint rules use the account-id mode builtin
    """
    service = definition.service
    custom = definition.customization

    bearer = _uses_any(service.auth, BEARER_AUTH)
    sigv4a = _uses_any(service.auth, SIGV4A_AUTH)
    request_checksum = False
    response_checksum = False

    for op in definition.operations.values():
        bearer = bearer or _uses_any(op.auth, BEARER_AUTH)
        sigv4a = sigv4a or _uses_any(op.auth, SIGV4A_AUTH)
        request_checksum = request_checksum or _requests_checksum(op)
        response_checksum = response_checksum or _validates_checksum(op)

    model = CapabilityModel(
        service_name=service.name,
        descriptive_service_name=service.descriptive_name,
        base_package=service.package,
        has_endpoint_discovery_operation=definition.endpoint_operation is not None,
        endpoint_discovery_required=custom.enable_endpoint_discovery_method_required,
        service_config_type=custom.service_config,
        client_context_params=dict(definition.client_context_params),
        custom_client_context_params=dict(custom.custom_client_context_params),
        supports_account_id_endpoint_mode=ACCOUNT_ID_ENDPOINT_MODE_BUILTIN in definition.endpoint_builtins,
        uses_bearer_auth=bearer,
        has_request_checksum_capability=request_checksum,
        has_response_checksum_capability=response_checksum,
        supports_sigv4a_region_set=sigv4a,
    )

    logger.debug(
        "Derived capabilities for %s: bearer=%s sigv4a=%s request_checksum=%s response_checksum=%s",
        service.name, bearer, sigv4a, request_checksum, response_checksum,
    )
    return model
