"""CLI entry point for routedoc."""

import importlib
import logging
from pathlib import Path

import click

from routedoc.app import DocumentedApi
from routedoc.exporter import export_document, render
from routedoc.generator.analyzer import analyze_route
from routedoc.utils.config import LOG_LEVEL, OUTPUT_PATH
from routedoc.utils.errors import RouteDocError, TargetLoadError
from routedoc.utils.logging import configure_root


def _load_target(target: str) -> DocumentedApi:
    """Load a DocumentedApi from 'module:attribute'. Callables are invoked."""
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise TargetLoadError(f"Target must look like 'module:attribute', got {target!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise TargetLoadError(f"Cannot import {module_name!r}: {exc}") from exc

    obj = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise TargetLoadError(f"{module_name!r} has no attribute {attr!r}") from exc

    if callable(obj) and not isinstance(obj, DocumentedApi):
        obj = obj()
    if not isinstance(obj, DocumentedApi):
        raise TargetLoadError(f"{target!r} is not a DocumentedApi (got {type(obj).__name__})")
    return obj


def _load(target: str) -> DocumentedApi:
    try:
        return _load_target(target)
    except TargetLoadError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """routedoc: generate OpenAPI documents from documented route trees."""
    configure_root(logging.DEBUG if verbose else LOG_LEVEL)


@main.command()
@click.argument("target")
@click.option("-o", "--output", default=str(OUTPUT_PATH), show_default=True, type=click.Path(path_type=Path), help="Output file for the document.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "yaml", "json"]), help="Output format; auto picks by file extension.")
def generate(target: str, output: Path, fmt: str):
    """Generate the OpenAPI document for TARGET and write it to a file."""
    api = _load(target)
    try:
        document = api.openapi()
    except RouteDocError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Found {len(document.paths)} paths.")
    export_document(document, output, fmt=fmt)
    click.echo(f"Document saved to {output}")


@main.command()
@click.argument("target")
@click.option("--format", "fmt", default="yaml", type=click.Choice(["yaml", "json"]), help="Output format.")
def show(target: str, fmt: str):
    """Print the OpenAPI document for TARGET."""
    api = _load(target)
    try:
        document = api.openapi()
    except RouteDocError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(render(document, fmt), nl=False)


@main.command()
@click.argument("target")
def routes(target: str):
    """List the documented routes of TARGET as 'METHOD /path'."""
    api = _load(target)
    for node, _ in api.operations.documented(api.routing.walk()):
        try:
            info = analyze_route(node)
        except RouteDocError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(f"{info.method} {info.url}")
