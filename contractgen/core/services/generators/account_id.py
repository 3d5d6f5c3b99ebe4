"""
Account-id endpoint mode provider.

The catalog delegates the ``account_id_endpoint_mode`` slot to this
provider instead of describing the method itself. Callers can swap it
out through ``synthesize(..., providers={...})``.
"""

from __future__ import annotations

from contractgen.core.models.capability import CapabilityModel
from contractgen.core.models.method import MethodEntry, OverridePolicy, Parameter

ACCOUNT_ID_ENDPOINT_MODE_BUILTIN = "AWS::Auth::AccountIdEndpointMode"
ACCOUNT_ID_ENDPOINT_MODE_TYPE = "AccountIdEndpointMode"


def account_id_endpoint_mode_methods(model: CapabilityModel) -> list[MethodEntry]:
    """Builder methods for account-id based endpoint resolution, if supported."""
    if not model.supports_account_id_endpoint_mode:
        return []
    return [
        MethodEntry(
            name="accountIdEndpointMode",
            parameters=[Parameter(name="accountIdEndpointMode", type=ACCOUNT_ID_ENDPOINT_MODE_TYPE)],
            override_policy=OverridePolicy.DEFAULT_THROWS_UNIMPLEMENTED,
            documentation=(
                "Sets the behavior when account ID based endpoints are created. "
                f"See {{@link {ACCOUNT_ID_ENDPOINT_MODE_TYPE}}} for values"
            ),
            body="throw new UnsupportedOperationException()",
        )
    ]
