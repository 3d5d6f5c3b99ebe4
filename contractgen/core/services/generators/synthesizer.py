"""
Contract synthesizer: capability model in, ordered method contracts out.

Walks ``METHOD_CATALOG`` once, in order. An entry contributes all of its
methods when its predicate holds, none otherwise. The model is never
mutated and nothing is retained between calls, so the same model always
yields an equal list.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from contractgen.core.models.capability import CapabilityModel
from contractgen.core.models.method import BuilderContract, MethodEntry
from contractgen.core.services.generators.catalog import METHOD_CATALOG, Expander

logger = logging.getLogger(__name__)

CLIENT_BUILDER_SUPER_INTERFACE = "AwsClientBuilder<B, C>"
PUBLIC_API_ANNOTATION = "SdkPublicApi"


def synthesize(
    model: CapabilityModel,
    providers: Mapping[str, Expander] | None = None,
) -> list[MethodEntry]:
    """Derive the ordered builder methods for a capability model.

    Args:
        model: Capability model of one service.
        providers: Optional expanders keyed by catalog key, replacing the
            catalog's own expander for that entry (e.g. an external
            ``account_id_endpoint_mode`` provider).

    Returns:
        MethodEntry list in catalog order; dynamic groups keep their
        mapping's insertion order.
    """
    providers = providers or {}
    methods: list[MethodEntry] = []

    for entry in METHOD_CATALOG:
        if not entry.applies(model):
            continue
        expand = providers.get(entry.key, entry.expand)
        produced = expand(model)
        logger.debug(
            "%s: +%d (%s)", entry.key, len(produced), ", ".join(m.name for m in produced),
        )
        methods.extend(produced)

    logger.debug("Synthesized %d methods for '%s'", len(methods), model.service_name)
    return methods


def synthesize_contract(
    model: CapabilityModel,
    providers: Mapping[str, Expander] | None = None,
) -> BuilderContract:
    """Wrap ``synthesize`` output with the interface-level metadata."""
    interface = model.base_builder_interface_name
    return BuilderContract(
        interface_name=interface,
        package=model.base_package,
        type_variables=[f"B extends {interface}<B, C>", "C"],
        super_interface=CLIENT_BUILDER_SUPER_INTERFACE,
        annotations=[PUBLIC_API_ANNOTATION],
        documentation=(
            f"This includes configuration specific to {model.display_name} that is supported by "
            f"both {{@link {model.sync_builder_interface_name}}} and "
            f"{{@link {model.async_builder_interface_name}}}."
        ),
        methods=synthesize(model, providers),
    )
