"""
Model check use case: validate service.yml and report issues.

Setter name collisions are caught here, before synthesis. The
synthesizer itself assumes a well-formed model.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from contractgen.core.config.loader import ConfigError, find_model_file, load_capability_model
from contractgen.core.models.capability import CapabilityModel
from contractgen.core.services.generators.catalog import reserved_method_names
from contractgen.core.services.generators.naming import lower_camel_case


@dataclass
class ModelCheckResult:
    """Result of model validation."""

    valid: bool = False
    model: CapabilityModel | None = None
    model_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "model_path": str(self.model_path) if self.model_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "service_name": self.model.service_name if self.model else None,
            "context_param_count": (
                len(self.model.client_context_params) + len(self.model.custom_client_context_params)
                if self.model else 0
            ),
        }


def collect_model_issues(model: CapabilityModel) -> tuple[list[str], list[str]]:
    """Semantic checks on a loaded model.

    Returns:
        (errors, warnings)
    """
    errors: list[str] = []
    warnings: list[str] = []

    params = list(model.client_context_params.items()) + list(model.custom_client_context_params.items())
    setters = {name: lower_camel_case(name) for name, _ in params}

    # Context param setters colliding with one another
    counts = Counter(setters.values())
    for setter, count in sorted(counts.items()):
        if count > 1:
            sources = sorted(n for n, s in setters.items() if s == setter)
            errors.append(f"Context params {', '.join(sources)} all map to setter '{setter}'")
    # Same key declared in both groups
    shared = sorted(set(model.client_context_params) & set(model.custom_client_context_params))
    for name in shared:
        errors.append(f"Context param '{name}' is declared as both client and custom param")

    # Context param setters shadowing fixed builder methods
    reserved = reserved_method_names()
    for name, setter in setters.items():
        if setter in reserved:
            errors.append(f"Context param '{name}' collides with builder method '{setter}'")
        if not setter:
            errors.append(f"Context param '{name}' does not yield a valid setter name")

    for name, param in params:
        if not param.type.strip():
            errors.append(f"Context param '{name}' has no type")

    if model.endpoint_discovery_required and not model.has_endpoint_discovery_operation:
        warnings.append(
            "endpoint_discovery_required is set but the service has no endpoint "
            "discovery operation; enableEndpointDiscovery will not be generated."
        )

    if not model.service_name:
        warnings.append("No service name set. Default type names will be unqualified.")

    return errors, warnings


def check_model(model_path: Path | None = None) -> ModelCheckResult:
    """Validate a service model and report issues.

    Args:
        model_path: Optional explicit path to service.yml.

    Returns:
        ModelCheckResult with validation status and any issues.
    """
    result = ModelCheckResult()

    if model_path is None:
        model_path = find_model_file()

    if model_path is None:
        result.errors.append("No service.yml found.")
        return result

    result.model_path = model_path

    try:
        model = load_capability_model(model_path)
        result.model = model
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    errors, warnings = collect_model_issues(model)
    result.errors.extend(errors)
    result.warnings.extend(warnings)

    result.valid = len(result.errors) == 0
    return result
