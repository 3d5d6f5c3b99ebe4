"""
Synthesize use case: load a service model and build its builder contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from contractgen.core.config.loader import ConfigError, load_capability_model
from contractgen.core.models.method import BuilderContract
from contractgen.core.services.generators.synthesizer import synthesize_contract


@dataclass
class SynthesizeResult:
    """Synthesized contract, or the reason there is none."""

    contract: BuilderContract | None = None
    model_path: Path | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        if self.error:
            return {"error": self.error}
        assert self.contract is not None
        data = self.contract.model_dump(mode="json")
        data["method_count"] = len(self.contract.methods)
        return data


def run_synthesize(model_path: Path | None = None) -> SynthesizeResult:
    """Load the model and synthesize its builder contract.

    Args:
        model_path: Optional explicit path to service.yml.
    """
    result = SynthesizeResult(model_path=model_path)

    try:
        model = load_capability_model(model_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    result.contract = synthesize_contract(model)
    return result
