"""CLI entry point for Stock Inventory."""

import logging
import os
import sys

import click

from stock_inventory import __version__, configure_logging
from stock_inventory.api.app import create_observability
from stock_inventory.config.loader import CONFIG_ENV_VAR, PROFILE_ENV_VAR, resolve_config
from stock_inventory.domain.entities import StockCreateRequest
from stock_inventory.domain.value_objects import OperationKind, Rejected
from stock_inventory.pipeline.failure_injection import (
    RandomFailureInjector,
    RecommendationRule,
)
from stock_inventory.pipeline.staged_pipeline import build_operand, build_pipeline
from stock_inventory.pipeline.stages import STAGE_DEFINITIONS

_ID_KINDS = {
    OperationKind.LOOKUP_BY_ID,
    OperationKind.UPDATE_VALIDATION,
    OperationKind.PRICE_UPDATE_VALIDATION,
    OperationKind.DELETE_VALIDATION,
}


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "config_path", type=click.Path(), default=None, help="YAML config file")
@click.option("--profile", default=None, help="Config profile to merge")
@click.pass_context
def cli(ctx, config_path, profile):
    """Stock Inventory - stock records behind a staged validation pipeline."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["profile"] = profile


@cli.command()
@click.option("--host", default=None, help="Bind host (overrides config)")
@click.option("--port", default=None, type=int, help="Bind port (overrides config)")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
@click.pass_context
def serve(ctx, host, port, reload):
    """Start the HTTP API server."""
    import uvicorn

    config = resolve_config(ctx.obj["config_path"], ctx.obj["profile"])
    configure_logging(getattr(logging, config.logging.level))
    # The app factory re-resolves config in the server process
    if ctx.obj["config_path"]:
        os.environ[CONFIG_ENV_VAR] = str(ctx.obj["config_path"])
    if ctx.obj["profile"]:
        os.environ[PROFILE_ENV_VAR] = ctx.obj["profile"]

    host = host or config.api.host
    port = port or config.api.port
    click.echo(f"Starting API server on {host}:{port}")
    uvicorn.run(
        "stock_inventory.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


@cli.command()
@click.argument("kind", type=click.Choice([k.value for k in OperationKind]))
@click.argument("value", required=False)
@click.option("--company-name", default=None, help="Company name for create_validation")
@click.pass_context
def check(ctx, kind, value, company_name):
    """Run the validation pipeline once for KIND with VALUE."""
    config = resolve_config(ctx.obj["config_path"], ctx.obj["profile"])
    observability = create_observability(config)
    pipeline = build_pipeline(config.pipeline, observability, observability)

    operation_kind = OperationKind(kind)
    if operation_kind in _ID_KINDS:
        raw = _parse_id(value)
    elif operation_kind == OperationKind.CREATE_VALIDATION:
        raw = StockCreateRequest(symbol=value, company_name=company_name)
    else:
        raw = value

    result = pipeline.evaluate(operation_kind, build_operand(operation_kind, raw))
    if isinstance(result, Rejected):
        click.echo(
            f"REJECTED stage={result.stage_rank} ({result.stage_name}) "
            f"kind={result.failure_kind.value}: {result.message}"
        )
        sys.exit(1)
    click.echo("PROCEED")


@cli.command()
@click.pass_context
def rules(ctx):
    """List the stage order and the terminal failure rules."""
    config = resolve_config(ctx.obj["config_path"], ctx.obj["profile"])
    click.echo("Stages:")
    for rank, (name, _subject) in enumerate(STAGE_DEFINITIONS, start=1):
        click.echo(f"  {rank}. {name}")

    rule = RecommendationRule(
        sentinels=config.pipeline.sentinels,
        injector=RandomFailureInjector(config.pipeline.bulk_failure_probability),
    )
    click.echo("Recommendation rules:")
    for condition, message in rule.sentinel_table():
        click.echo(f"  {condition}: {message}")


def _parse_id(value):
    """Integer id, or None when absent."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not an integer id", param_hint="VALUE")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
