"""
Method contract models: the synthesizer's output.

A MethodEntry is a fully specified builder method ready for rendering.
A BuilderContract wraps the ordered entries with the interface-level
metadata an emitter needs.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class OverridePolicy(str, Enum):
    """How a concrete builder implementation relates to a contract method."""

    ABSTRACT_REQUIRED = "abstract_required"
    DEFAULT_WITH_BODY = "default_with_body"
    DEFAULT_THROWS_UNIMPLEMENTED = "default_throws_unimplemented"
    DEPRECATED_ALIAS = "deprecated_alias"

    @property
    def has_default(self) -> bool:
        """Whether the contract itself carries a method body."""
        return self in (
            OverridePolicy.DEFAULT_WITH_BODY,
            OverridePolicy.DEFAULT_THROWS_UNIMPLEMENTED,
        )


class Parameter(BaseModel):
    """A single method parameter."""

    name: str
    type: str


class MethodEntry(BaseModel):
    """One configuration method of the shared builder contract.

    Attributes:
        name:            Method name (overload pairs share it).
        parameters:      Ordered parameters.
        override_policy: Whether and how implementations must override it.
        documentation:   Documentation text, rendered by the emitter.
        returns_builder_self_type: Always true: every setter returns ``B``.
        body:            Default body statement, ``None`` for abstract forms.
        replaced_by:     Replacement method name for deprecated aliases.
    """

    name: str
    parameters: list[Parameter] = Field(default_factory=list)
    override_policy: OverridePolicy
    documentation: str = ""
    returns_builder_self_type: bool = True
    body: str | None = None
    replaced_by: str | None = None

    @property
    def deprecated(self) -> bool:
        return self.override_policy is OverridePolicy.DEPRECATED_ALIAS

    @property
    def parameter_types(self) -> list[str]:
        return [p.type for p in self.parameters]

    @property
    def signature(self) -> str:
        """Compact ``name(Type name, ...)`` form for listings."""
        params = ", ".join(f"{p.type} {p.name}" for p in self.parameters)
        return f"{self.name}({params})"


class BuilderContract(BaseModel):
    """The base builder interface shared by sync and async builders."""

    interface_name: str
    package: str = ""
    type_variables: list[str] = Field(default_factory=list)
    super_interface: str = ""
    annotations: list[str] = Field(default_factory=list)
    documentation: str = ""
    methods: list[MethodEntry] = Field(default_factory=list)

    @property
    def method_names(self) -> list[str]:
        return [m.name for m in self.methods]

    def methods_named(self, name: str) -> list[MethodEntry]:
        """All entries sharing a name (overloads included)."""
        return [m for m in self.methods if m.name == name]
