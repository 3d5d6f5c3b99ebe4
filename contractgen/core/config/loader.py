"""
Configuration loader: reads service.yml into a CapabilityModel.

This is the primary entry point for loading a service description.
It reads YAML, validates against Pydantic schemas, and returns the
typed capability model the synthesizer consumes.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from contractgen.core.models.capability import CapabilityModel
from contractgen.core.models.service import ServiceDefinition
from contractgen.core.services.capabilities import derive_capabilities

logger = logging.getLogger(__name__)

# Default model filename
MODEL_CONFIG_FILE = "service.yml"


class ConfigError(Exception):
    """Raised when a service model is invalid or missing."""


def find_model_file(start_dir: Path | None = None) -> Path | None:
    """Search for service.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to service.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / MODEL_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def read_model_document(path: Path) -> dict:
    """Read and parse a model file into a raw mapping.

    Raises:
        ConfigError: If the file is missing, unreadable, or not a YAML mapping.
    """
    if not path.is_file():
        raise ConfigError(f"Model file not found: {path}")

    logger.debug("Loading service model from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    return data


def parse_capability_model(data: dict) -> CapabilityModel:
    """Turn a raw model document into a CapabilityModel.

    Two shapes are accepted: a ``capabilities:`` mapping holding the
    flags directly, or a full service definition (``service:``,
    ``operations:``, ...) from which the flags are derived.
    """
    try:
        if "capabilities" in data:
            return CapabilityModel.model_validate(data["capabilities"] or {})
        definition = ServiceDefinition.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid service model: {e}") from e

    return derive_capabilities(definition)


def load_capability_model(path: Path | None = None) -> CapabilityModel:
    """Load and validate a capability model.

    Args:
        path: Explicit path to service.yml. If None, searches upward.

    Returns:
        Validated CapabilityModel.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_model_file()

    if path is None:
        raise ConfigError(
            f"No {MODEL_CONFIG_FILE} found. "
            "Create one in the current directory, or specify --model."
        )

    model = parse_capability_model(read_model_document(path))

    logger.info(
        "Loaded service model '%s' with %d context params",
        model.service_name,
        len(model.client_context_params) + len(model.custom_client_context_params),
    )
    return model
