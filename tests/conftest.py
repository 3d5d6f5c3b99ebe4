"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from pathlib import Path

import pytest

from contractgen.core.models import CapabilityModel, ClientContextParam


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler and level changes made by setup_logging."""
    logger = logging.getLogger("contractgen")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def empty_model() -> CapabilityModel:
    """A model with every optional capability off."""
    return CapabilityModel(service_name="Example")


@pytest.fixture
def full_model() -> CapabilityModel:
    """A model with every capability on."""
    return CapabilityModel(
        service_name="Example",
        descriptive_service_name="Example Service",
        base_package="com.example.services.example",
        has_endpoint_discovery_operation=True,
        endpoint_discovery_required=True,
        service_config_type="ExampleServiceConfiguration",
        client_context_params={
            "ForcePathStyle": ClientContextParam(type="Boolean", documentation="Path style."),
            "Accelerate": ClientContextParam(type="Boolean"),
        },
        custom_client_context_params={
            "CrossRegionAccessEnabled": ClientContextParam(type="Boolean"),
        },
        supports_account_id_endpoint_mode=True,
        uses_bearer_auth=True,
        has_request_checksum_capability=True,
        has_response_checksum_capability=True,
        supports_sigv4a_region_set=True,
    )


@pytest.fixture
def service_yml(tmp_path: Path) -> Path:
    """A full service definition written to tmp_path/service.yml."""
    content = textwrap.dedent("""\
        service:
          name: Example
          descriptive_name: Example Service
          package: com.example.services.example
          auth: [sigv4]
        endpoint_operation: DescribeEndpoints
        client_context_params:
          ForcePathStyle:
            type: Boolean
            documentation: Forces path style addressing.
          UseFIPS:
            type: Boolean
        endpoint_builtins:
          - AWS::Region
          - AWS::Auth::AccountIdEndpointMode
        customization:
          service_config: ExampleServiceConfiguration
          enable_endpoint_discovery_method_required: true
          custom_client_context_params:
            CrossRegionAccessEnabled:
              type: Boolean
        operations:
          PutThing:
            auth: [bearer]
            http_checksum:
              request_algorithm_member: ChecksumAlgorithm
          GetThing:
            auth: [sigv4]
    """)
    path = tmp_path / "service.yml"
    path.write_text(content)
    return path
