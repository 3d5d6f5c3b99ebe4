"""
contractgen: CLI entrypoint.

Usage:
    python -m contractgen.main --help
    python -m contractgen.main synthesize
    python -m contractgen.main --model path/to/service.yml check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from contractgen import __version__
from contractgen.core.observability.logging_config import resolve_level, setup_logging

_POLICY_COLORS = {
    "abstract_required": "cyan",
    "default_with_body": "green",
    "default_throws_unimplemented": "yellow",
    "deprecated_alias": "red",
}


@click.group()
@click.version_option(version=__version__, prog_name="contractgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--model",
    "-m",
    "model_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to service.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    model_path: str | None,
) -> None:
    """Builder contract synthesizer: derive shared client builder methods from a service model."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["model_path"] = Path(model_path) if model_path else None

    setup_logging(resolve_level(debug=debug, verbose=verbose, quiet=quiet))


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def synthesize(ctx: click.Context, as_json: bool) -> None:
    """Synthesize the base builder contract for the service model."""
    from contractgen.core.use_cases.synthesize import run_synthesize

    result = run_synthesize(model_path=ctx.obj.get("model_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    contract = result.contract
    assert contract is not None  # guaranteed after error check above

    if not ctx.obj.get("quiet", False):
        click.secho(f"\n📐 {contract.interface_name}", fg="cyan", bold=True)
        if contract.package:
            click.echo(f"   📦 {contract.package}")
        click.echo(f"   <{', '.join(contract.type_variables)}>")
        click.echo(f"   extends {contract.super_interface}")
        click.echo()

    click.secho(f"   Methods: {len(contract.methods)}", fg="white", bold=True)
    for method in contract.methods:
        policy = method.override_policy.value
        click.echo(f"     • {method.signature}  ", nl=False)
        click.secho(policy, fg=_POLICY_COLORS.get(policy, "white"))

    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Validate service.yml and check for setter name collisions."""
    from contractgen.core.use_cases.model_check import check_model

    result = check_model(model_path=ctx.obj.get("model_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.model is not None  # guaranteed when valid
        click.secho("✅ Service model is valid", fg="green", bold=True)
        click.echo(f"   Service: {result.model.service_name}")
        click.echo(f"   Context params: {result.to_dict()['context_param_count']}")
    else:
        click.secho("❌ Service model errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def catalog(as_json: bool) -> None:
    """List the method catalog in evaluation order."""
    from contractgen.core.services.generators.catalog import METHOD_CATALOG

    if as_json:
        click.echo(json.dumps(
            [
                {"key": e.key, "description": e.description, "dynamic": e.dynamic}
                for e in METHOD_CATALOG
            ],
            indent=2,
        ))
        return

    click.secho("📚 Method catalog", fg="cyan", bold=True)
    for index, entry in enumerate(METHOD_CATALOG, start=1):
        marker = " (per param)" if entry.dynamic else ""
        click.echo(f"   {index:>2}. {entry.key}{marker}  {entry.description}")


if __name__ == "__main__":
    cli()
