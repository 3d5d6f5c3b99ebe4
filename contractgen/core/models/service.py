"""
Service definition: the YAML-facing description of a service.

This is the raw shape read from ``service.yml``. Capability flags are
not stored here; ``derive_capabilities`` computes them from the
definition in a single pass.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from contractgen.core.models.capability import ClientContextParam


class HttpChecksum(BaseModel):
    """Checksum traits of an operation."""

    request_algorithm_member: str | None = None
    response_algorithms: list[str] | None = None


class Operation(BaseModel):
    """An operation of the service, reduced to what capability derivation reads."""

    auth: list[str] = Field(default_factory=list)
    http_checksum: HttpChecksum | None = None


class ServiceInfo(BaseModel):
    """Service identity and service-wide auth schemes."""

    name: str
    descriptive_name: str = ""
    package: str = ""
    auth: list[str] = Field(default_factory=list)


class Customization(BaseModel):
    """Per-service code generation customizations."""

    service_config: str | None = None
    enable_endpoint_discovery_method_required: bool = False
    custom_client_context_params: dict[str, ClientContextParam] = Field(default_factory=dict)


class ServiceDefinition(BaseModel):
    """Root of ``service.yml``."""

    service: ServiceInfo
    endpoint_operation: str | None = None
    client_context_params: dict[str, ClientContextParam] = Field(default_factory=dict)
    endpoint_builtins: list[str] = Field(default_factory=list)
    customization: Customization = Field(default_factory=Customization)
    operations: dict[str, Operation] = Field(default_factory=dict)

    def get_operation(self, name: str) -> Operation | None:
        """Look up an operation by name."""
        return self.operations.get(name)
