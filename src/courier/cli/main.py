#!/usr/bin/env python3
"""Courier CLI main entry point.

Issues correlated HTTP requests through the resilient client and shows the
effective configuration.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from ..core.config import ConfigManager, CourierConfig
from ..core.correlation import RequestContextManager
from ..exceptions import ConfigurationError, HttpClientError
from ..infrastructure.http import HttpClient, HttpMethod, HttpRequestConfig
from ..logging import configure_logging
from . import __version__

console = Console()
error_console = Console(stderr=True)


def _load_config(ctx: click.Context) -> CourierConfig:
    """Load configuration or exit with a readable error."""
    try:
        return ConfigManager(ctx.obj.get("config_file")).load_config()
    except ConfigurationError as e:
        error_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        sys.exit(1)


def _parse_pairs(values: Tuple[str, ...], separator: str, option: str) -> Optional[Dict[str, str]]:
    """Parse repeated ``name<sep>value`` options into a dict."""
    pairs: Dict[str, str] = {}
    for value in values:
        name, found, item = value.partition(separator)
        if not found or not name.strip():
            raise click.BadParameter(
                f"expected NAME{separator}VALUE, got {value!r}", param_hint=option
            )
        pairs[name.strip()] = item.strip()
    return pairs or None


def _parse_body(data: Optional[str]) -> Any:
    if data is None:
        return None
    try:
        return json.loads(data)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON: {e}", param_hint="--data") from e


@click.group()
@click.version_option(version=__version__, prog_name="courier")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Configuration file path (TOML)"
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path]) -> None:
    """Courier: request-correlated HTTP calls with retries and structured logs.

    \b
    Examples:
        courier request GET https://httpbin.org/get
        courier request POST /post --base-url https://httpbin.org -d '{"a": 1}'
        courier request GET https://httpbin.org/status/503 --retries 2
        courier config
    """
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config


@cli.command()
@click.argument(
    "method",
    type=click.Choice([m.value for m in HttpMethod], case_sensitive=False)
)
@click.argument("url")
@click.option("--data", "-d", help="JSON request body")
@click.option(
    "--header", "-H", "headers",
    multiple=True,
    help="Request header as NAME:VALUE (repeatable)"
)
@click.option(
    "--param", "-p", "params",
    multiple=True,
    help="Query parameter as KEY=VALUE (repeatable)"
)
@click.option("--base-url", help="Prefix prepended to URL")
@click.option(
    "--retries",
    type=click.IntRange(min=0),
    help="Retries after the first attempt (default from config)"
)
@click.option(
    "--timeout",
    type=click.IntRange(min=1),
    help="Per-attempt timeout in milliseconds (default from config)"
)
@click.option("--request-id", help="Request ID to propagate (generated when omitted)")
@click.pass_context
def request(
    ctx: click.Context,
    method: str,
    url: str,
    data: Optional[str],
    headers: Tuple[str, ...],
    params: Tuple[str, ...],
    base_url: Optional[str],
    retries: Optional[int],
    timeout: Optional[int],
    request_id: Optional[str],
) -> None:
    """Send an HTTP request and print the response.

    \b
    Examples:
        courier request GET https://httpbin.org/get -p q=courier
        courier request PUT https://httpbin.org/put -H "Authorization:Bearer x" -d '[1, 2]'
    """
    config = _load_config(ctx)
    configure_logging(config.logging)

    body = _parse_body(data)
    request_config = HttpRequestConfig(
        headers=_parse_pairs(headers, ":", "--header"),
        params=_parse_pairs(params, "=", "--param"),
        timeout=timeout,
        retries=retries,
        base_url=base_url,
    )

    with RequestContextManager.scope(request_id=request_id) as context:
        with HttpClient.from_config(config.http) as client:
            try:
                response = client.request(method, url, body, request_config)
            except HttpClientError as e:
                status = f" (status {e.status})" if e.status is not None else ""
                error_console.print(f"[red]Error{status}:[/red] {escape(e.message)}")
                error_console.print(f"[dim]Request ID: {context.request_id}[/dim]")
                sys.exit(1)

    console.print(f"[bold]{response.status} {escape(response.status_text)}[/bold]")
    console.print(f"[dim]Request ID: {context.request_id}[/dim]")
    if isinstance(response.data, (dict, list)):
        console.print_json(data=response.data)
    elif response.data is not None:
        console.print(str(response.data), markup=False, highlight=False)


@cli.command(name="config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show the effective configuration (file and environment applied)."""
    config = _load_config(ctx)
    console.print_json(data=config.model_dump(mode="json"))


def main() -> None:
    """Entry point for the courier console script."""
    cli()


if __name__ == "__main__":
    main()
