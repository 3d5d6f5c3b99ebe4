"""
Capability model: what a service client supports.

A CapabilityModel is built once per service definition (usually by
``contractgen.core.services.capabilities.derive_capabilities``) and is
treated as read-only input by the synthesizer.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ClientContextParam(BaseModel):
    """A client-level endpoint parameter exposed as a builder setter."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    type: str
    documentation: str = ""


class CapabilityModel(BaseModel):
    """Capability flags of one service client.

    Field names are snake_case; the camelCase spelling
    (``usesBearerAuth``, ``clientContextParams``, ...) is accepted too.
    Mapping fields keep their insertion order. Unknown keys are rejected.

    ``hasServiceLevelConfig`` is not stored: it is derived from
    ``service_config_type`` and, when given, must agree with it.
    """

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, extra="forbid")

    # ── Identity ─────────────────────────────────────────────────
    service_name: str = ""
    descriptive_service_name: str = ""
    base_package: str = ""

    base_builder_interface: str | None = None
    sync_builder_interface: str | None = None
    async_builder_interface: str | None = None

    # ── Endpoint discovery ───────────────────────────────────────
    has_endpoint_discovery_operation: bool = False
    endpoint_discovery_required: bool = False   # deprecated alias demanded by customization

    # ── Type names ───────────────────────────────────────────────
    service_config_type: str | None = None
    endpoint_provider_type: str | None = None
    auth_scheme_provider_type: str | None = None

    # ── Dynamic setters ──────────────────────────────────────────
    client_context_params: dict[str, ClientContextParam] = Field(default_factory=dict)
    custom_client_context_params: dict[str, ClientContextParam] = Field(default_factory=dict)

    # ── Optional capabilities ────────────────────────────────────
    supports_account_id_endpoint_mode: bool = False
    uses_bearer_auth: bool = False
    has_request_checksum_capability: bool = False
    has_response_checksum_capability: bool = False
    supports_sigv4a_region_set: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "supports_sigv4a_region_set", "supportsSigV4aRegionSet", "supportsSigv4aRegionSet",
        ),
    )

    @model_validator(mode="before")
    @classmethod
    def _fold_service_level_flag(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        flag = None
        for key in ("hasServiceLevelConfig", "has_service_level_config"):
            if key in data:
                flag = data.pop(key)
        config_type = data.get("service_config_type") or data.get("serviceConfigType")
        if flag is not None and bool(flag) != bool(config_type):
            raise ValueError(
                "hasServiceLevelConfig must be set exactly when serviceConfigType is given"
            )
        return data

    @property
    def has_service_level_config(self) -> bool:
        """Whether the service declares its own configuration type."""
        return bool(self.service_config_type)

    @property
    def endpoint_provider_type_name(self) -> str:
        return self.endpoint_provider_type or f"{self.service_name}EndpointProvider"

    @property
    def auth_scheme_provider_type_name(self) -> str:
        return self.auth_scheme_provider_type or f"{self.service_name}AuthSchemeProvider"

    @property
    def base_builder_interface_name(self) -> str:
        return self.base_builder_interface or f"{self.service_name}BaseClientBuilder"

    @property
    def sync_builder_interface_name(self) -> str:
        return self.sync_builder_interface or f"{self.service_name}ClientBuilder"

    @property
    def async_builder_interface_name(self) -> str:
        return self.async_builder_interface or f"{self.service_name}AsyncClientBuilder"

    @property
    def display_name(self) -> str:
        """Human-readable service name for documentation."""
        return self.descriptive_service_name or self.service_name
