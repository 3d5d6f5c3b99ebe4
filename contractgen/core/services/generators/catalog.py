"""
Method catalog: the ordered table of candidate builder methods.

Each ``CatalogEntry`` pairs an inclusion predicate with an expander.
The expander returns every method the entry contributes, so overload
pairs (and the deprecated endpoint-discovery alias with its replacement)
are emitted as one unit.

Order of ``METHOD_CATALOG`` is the order of the synthesized contract.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from contractgen.core.models.capability import CapabilityModel, ClientContextParam
from contractgen.core.models.method import MethodEntry, OverridePolicy, Parameter
from contractgen.core.services.generators.account_id import account_id_endpoint_mode_methods
from contractgen.core.services.generators.naming import lower_camel_case

Predicate = Callable[[CapabilityModel], bool]
Expander = Callable[[CapabilityModel], list[MethodEntry]]


# ── Shared type names and statements ────────────────────────────

THROW_UNSUPPORTED = "throw new UnsupportedOperationException()"

TOKEN_PROVIDER_TYPE = "SdkTokenProvider"
TOKEN_IDENTITY_PROVIDER_TYPE = "IdentityProvider<? extends TokenIdentity>"
REQUEST_CHECKSUM_CALCULATION_TYPE = "RequestChecksumCalculation"
RESPONSE_CHECKSUM_VALIDATION_TYPE = "ResponseChecksumValidation"
REGION_SET_TYPE = "RegionSet"

_TOKEN_PROVIDER_DOC = (
    "Set the token provider to use for bearer token authorization. This is optional, if none "
    "is provided, the SDK will use {@link DefaultAwsTokenProvider}.\n"
    "<p>\n"
    "If the service, or any of its operations require Bearer Token Authorization, then the "
    "SDK will default to this token provider to retrieve the token to use for authorization.\n"
    "<p>\n"
    "This provider works in conjunction with the {@code SdkAdvancedClientOption.TOKEN_SIGNER} "
    "set on the client. By default it is {@link BearerTokenSigner}."
)

_SIGV4A_REGION_SET_DOC = (
    f"Sets the {{@link {REGION_SET_TYPE}}} to be used for operations using Sigv4a signing requests.\n"
    "This is optional; if not provided, the following precedence is used:\n"
    "<ol>\n"
    "    <li>{@link SdkSystemSetting#AWS_SIGV4A_SIGNING_REGION_SET}.</li>\n"
    "    <li>as <code>sigv4a_signing_region_set</code> in the configuration file.</li>\n"
    "    <li>The region configured for the client.</li>\n"
    "</ol>\n"
)


@dataclass(frozen=True)
class CatalogEntry:
    """One row of the method catalog.

    Attributes:
        key:         Stable identifier, also the override key for providers.
        description: What capability the row covers.
        applies:     Inclusion predicate evaluated against the model.
        expand:      Produces the row's methods, in order.
        dynamic:     True when method names come from the model itself.
    """

    key: str
    description: str
    applies: Predicate
    expand: Expander
    dynamic: bool = False


# ── Expanders ───────────────────────────────────────────────────


def _throws_unimplemented(name: str, param_type: str, documentation: str) -> MethodEntry:
    return MethodEntry(
        name=name,
        parameters=[Parameter(name=name, type=param_type)],
        override_policy=OverridePolicy.DEFAULT_THROWS_UNIMPLEMENTED,
        documentation=documentation,
        body=THROW_UNSUPPORTED,
    )


def _endpoint_discovery_methods(model: CapabilityModel) -> list[MethodEntry]:
    """Discovery toggle, preceded by its deprecated alias when required."""
    methods: list[MethodEntry] = []
    if model.endpoint_discovery_required:
        methods.append(MethodEntry(
            name="enableEndpointDiscovery",
            parameters=[Parameter(name="endpointDiscovery", type="boolean")],
            override_policy=OverridePolicy.DEPRECATED_ALIAS,
            documentation="@deprecated Use {@link #endpointDiscoveryEnabled(boolean)} instead.",
            replaced_by="endpointDiscoveryEnabled",
        ))
    methods.append(MethodEntry(
        name="endpointDiscoveryEnabled",
        parameters=[Parameter(name="endpointDiscovery", type="boolean")],
        override_policy=OverridePolicy.ABSTRACT_REQUIRED,
    ))
    return methods


def _service_configuration_methods(model: CapabilityModel) -> list[MethodEntry]:
    """Service config setter plus its consumer-builder convenience overload."""
    config_type = model.service_config_type or ""
    return [
        MethodEntry(
            name="serviceConfiguration",
            parameters=[Parameter(name="serviceConfiguration", type=config_type)],
            override_policy=OverridePolicy.ABSTRACT_REQUIRED,
        ),
        MethodEntry(
            name="serviceConfiguration",
            parameters=[Parameter(
                name="serviceConfiguration",
                type=f"Consumer<{config_type}.Builder>",
            )],
            override_policy=OverridePolicy.DEFAULT_WITH_BODY,
            body=(
                f"return serviceConfiguration({config_type}.builder()"
                ".applyMutation(serviceConfiguration).build())"
            ),
        ),
    ]


def _endpoint_provider_methods(model: CapabilityModel) -> list[MethodEntry]:
    provider = model.endpoint_provider_type_name
    return [_throws_unimplemented(
        "endpointProvider",
        provider,
        f"Set the {{@link {provider}}} implementation that will be used by the client to "
        "determine the endpoint for each request. This is optional; if none is provided a "
        "default implementation will be used the SDK.",
    )]


def _auth_scheme_provider_methods(model: CapabilityModel) -> list[MethodEntry]:
    provider = model.auth_scheme_provider_type_name
    return [_throws_unimplemented(
        "authSchemeProvider",
        provider,
        f"Set the {{@link {provider}}} implementation that will be used by the client to "
        "resolve the auth scheme for each request. This is optional; if none is provided a "
        "default implementation will be used the SDK.",
    )]


def context_param_setter(name: str, param: ClientContextParam) -> MethodEntry:
    """Abstract setter for one client context parameter."""
    setter = lower_camel_case(name)
    return MethodEntry(
        name=setter,
        parameters=[Parameter(name=setter, type=param.type)],
        override_policy=OverridePolicy.ABSTRACT_REQUIRED,
        documentation=param.documentation,
    )


def _setters(params: Mapping[str, ClientContextParam]) -> list[MethodEntry]:
    return [context_param_setter(name, param) for name, param in params.items()]


def _token_provider_methods(model: CapabilityModel) -> list[MethodEntry]:
    """Primitive token provider overload delegating to the identity-typed one."""
    return [
        MethodEntry(
            name="tokenProvider",
            parameters=[Parameter(name="tokenProvider", type=TOKEN_PROVIDER_TYPE)],
            override_policy=OverridePolicy.DEFAULT_WITH_BODY,
            documentation=_TOKEN_PROVIDER_DOC,
            body=f"return tokenProvider(({TOKEN_IDENTITY_PROVIDER_TYPE}) tokenProvider)",
        ),
        _throws_unimplemented("tokenProvider", TOKEN_IDENTITY_PROVIDER_TYPE, _TOKEN_PROVIDER_DOC),
    ]


def _request_checksum_methods(model: CapabilityModel) -> list[MethodEntry]:
    return [_throws_unimplemented(
        "requestChecksumCalculation",
        REQUEST_CHECKSUM_CALCULATION_TYPE,
        "Configures the client behavior for request checksum calculation.",
    )]


def _response_checksum_methods(model: CapabilityModel) -> list[MethodEntry]:
    return [_throws_unimplemented(
        "responseChecksumValidation",
        RESPONSE_CHECKSUM_VALIDATION_TYPE,
        "Configures the client behavior for response checksum validation.",
    )]


def _sigv4a_region_set_methods(model: CapabilityModel) -> list[MethodEntry]:
    return [_throws_unimplemented("sigv4aSigningRegionSet", REGION_SET_TYPE, _SIGV4A_REGION_SET_DOC)]


def _always(model: CapabilityModel) -> bool:
    return True


# ── Catalog ─────────────────────────────────────────────────────

METHOD_CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        key="endpoint_discovery",
        description="Endpoint discovery toggle (and its deprecated alias when required)",
        applies=lambda m: m.has_endpoint_discovery_operation,
        expand=_endpoint_discovery_methods,
    ),
    CatalogEntry(
        key="service_configuration",
        description="Service-level configuration object and consumer-builder overload",
        applies=lambda m: m.has_service_level_config,
        expand=_service_configuration_methods,
    ),
    CatalogEntry(
        key="endpoint_provider",
        description="Endpoint provider override",
        applies=_always,
        expand=_endpoint_provider_methods,
    ),
    CatalogEntry(
        key="auth_scheme_provider",
        description="Auth scheme provider override",
        applies=_always,
        expand=_auth_scheme_provider_methods,
    ),
    CatalogEntry(
        key="client_context_params",
        description="One setter per client context parameter",
        applies=lambda m: bool(m.client_context_params),
        expand=lambda m: _setters(m.client_context_params),
        dynamic=True,
    ),
    CatalogEntry(
        key="custom_client_context_params",
        description="One setter per customization-defined client context parameter",
        applies=lambda m: bool(m.custom_client_context_params),
        expand=lambda m: _setters(m.custom_client_context_params),
        dynamic=True,
    ),
    CatalogEntry(
        key="account_id_endpoint_mode",
        description="Account-id endpoint mode (delegated provider)",
        applies=lambda m: m.supports_account_id_endpoint_mode,
        expand=account_id_endpoint_mode_methods,
    ),
    CatalogEntry(
        key="token_provider",
        description="Bearer token provider overload pair",
        applies=lambda m: m.uses_bearer_auth,
        expand=_token_provider_methods,
    ),
    CatalogEntry(
        key="request_checksum_calculation",
        description="Request checksum calculation behavior",
        applies=lambda m: m.has_request_checksum_capability,
        expand=_request_checksum_methods,
    ),
    CatalogEntry(
        key="response_checksum_validation",
        description="Response checksum validation behavior",
        applies=lambda m: m.has_response_checksum_capability,
        expand=_response_checksum_methods,
    ),
    CatalogEntry(
        key="sigv4a_signing_region_set",
        description="SigV4a signing region set",
        applies=lambda m: m.supports_sigv4a_region_set,
        expand=_sigv4a_region_set_methods,
    ),
)


def catalog_keys() -> list[str]:
    """Catalog keys in evaluation order."""
    return [entry.key for entry in METHOD_CATALOG]


def get_entry(key: str) -> CatalogEntry | None:
    """Look up a catalog entry by key."""
    for entry in METHOD_CATALOG:
        if entry.key == key:
            return entry
    return None


def reserved_method_names() -> set[str]:
    """Names produced by the fixed (non-dynamic) catalog entries.

    Expands every fixed entry against a model with all capabilities on,
    so the result does not depend on any particular service.
    """
    everything = CapabilityModel(
        has_endpoint_discovery_operation=True,
        endpoint_discovery_required=True,
        service_config_type="ServiceConfiguration",
        supports_account_id_endpoint_mode=True,
        uses_bearer_auth=True,
        has_request_checksum_capability=True,
        has_response_checksum_capability=True,
        supports_sigv4a_region_set=True,
    )
    return {
        method.name
        for entry in METHOD_CATALOG
        if not entry.dynamic
        for method in entry.expand(everything)
    }
