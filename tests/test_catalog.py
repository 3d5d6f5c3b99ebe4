"""
Tests for the method catalog and identifier casing.
"""

import pytest

from contractgen.core.models import CapabilityModel, ClientContextParam, OverridePolicy
from contractgen.core.services.generators.catalog import (
    METHOD_CATALOG,
    catalog_keys,
    context_param_setter,
    get_entry,
    reserved_method_names,
)
from contractgen.core.services.generators.naming import (
    lower_camel_case,
    pascal_case,
    split_words,
)


# ═══════════════════════════════════════════════════════════════════
#  Catalog table
# ═══════════════════════════════════════════════════════════════════


class TestCatalogTable:
    def test_keys_in_order(self):
        assert catalog_keys() == [
            "endpoint_discovery",
            "service_configuration",
            "endpoint_provider",
            "auth_scheme_provider",
            "client_context_params",
            "custom_client_context_params",
            "account_id_endpoint_mode",
            "token_provider",
            "request_checksum_calculation",
            "response_checksum_validation",
            "sigv4a_signing_region_set",
        ]

    def test_keys_unique(self):
        keys = catalog_keys()
        assert len(keys) == len(set(keys))

    def test_dynamic_entries(self):
        dynamic = [e.key for e in METHOD_CATALOG if e.dynamic]
        assert dynamic == ["client_context_params", "custom_client_context_params"]

    def test_get_entry(self):
        entry = get_entry("token_provider")
        assert entry is not None
        assert entry.applies(CapabilityModel(uses_bearer_auth=True))
        assert not entry.applies(CapabilityModel())

    def test_get_unknown_entry(self):
        assert get_entry("nope") is None

    def test_provider_entries_always_apply(self):
        for key in ("endpoint_provider", "auth_scheme_provider"):
            assert get_entry(key).applies(CapabilityModel())

    def test_every_entry_has_description(self):
        assert all(e.description for e in METHOD_CATALOG)


class TestReservedNames:
    def test_fixed_names(self):
        assert reserved_method_names() == {
            "enableEndpointDiscovery",
            "endpointDiscoveryEnabled",
            "serviceConfiguration",
            "endpointProvider",
            "authSchemeProvider",
            "accountIdEndpointMode",
            "tokenProvider",
            "requestChecksumCalculation",
            "responseChecksumValidation",
            "sigv4aSigningRegionSet",
        }


class TestContextParamSetter:
    def test_setter(self):
        method = context_param_setter("ForcePathStyle", ClientContextParam(type="Boolean", documentation="doc"))
        assert method.name == "forcePathStyle"
        assert method.parameters[0].name == "forcePathStyle"
        assert method.parameter_types == ["Boolean"]
        assert method.override_policy is OverridePolicy.ABSTRACT_REQUIRED
        assert method.documentation == "doc"
        assert method.signature == "forcePathStyle(Boolean forcePathStyle)"


# ═══════════════════════════════════════════════════════════════════
#  Naming
# ═══════════════════════════════════════════════════════════════════


class TestNaming:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Foo", "foo"),
            ("ForcePathStyle", "forcePathStyle"),
            ("UseFIPS", "useFips"),
            ("DisableS3ExpressSessionAuth", "disableS3ExpressSessionAuth"),
            ("use_dual_stack", "useDualStack"),
            ("Region-Set", "regionSet"),
            ("foo", "foo"),
            ("EndpointA", "endpointa"),
            ("TESTv4", "testV4"),
            ("ApiV2Config", "apiV2Config"),
        ],
    )
    def test_lower_camel_case(self, name, expected):
        assert lower_camel_case(name) == expected

    def test_pascal_case(self):
        assert pascal_case("accelerate") == "Accelerate"

    def test_split_words(self):
        assert split_words("UseFIPSEndpoint") == ["Use", "FIPS", "Endpoint"]

    def test_split_keeps_trailing_capital(self):
        assert split_words("EndpointA") == ["EndpointA"]

    def test_split_version_suffix(self):
        assert split_words("TESTv4") == ["TEST", "v4"]

    def test_split_digit_boundary(self):
        assert split_words("DisableS3Express") == ["Disable", "S3", "Express"]

    def test_empty(self):
        assert lower_camel_case("") == ""
