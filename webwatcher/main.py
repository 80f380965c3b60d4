"""Command-line entry point: run a single Web check and print the result."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from webwatcher.config import settings
from webwatcher.errors import ConfigurationError, WatcherExecutionError
from webwatcher.web.configuration import Configurator
from webwatcher.web.http import HttpMethod, HttpRequest, HttpResponse
from webwatcher.web.result import WebWatcherCheckResult
from webwatcher.web.watcher import DEFAULT_NAME, WebWatcher

console = Console()

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _parse_headers(values: list[str]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for raw in values:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise ConfigurationError(f"Invalid header '{raw}', expected NAME:VALUE.")
        headers[name.strip()] = value.strip()
    return headers


def build_request(args: argparse.Namespace) -> HttpRequest:
    """Turn CLI arguments into an HttpRequest."""
    headers = _parse_headers(args.header or [])
    method = HttpMethod(args.method.upper())
    if method in (HttpMethod.POST, HttpMethod.PUT):
        data: Any = json.loads(args.data) if args.data else None
        factory = HttpRequest.post if method == HttpMethod.POST else HttpRequest.put
        return factory(args.endpoint, data, headers)
    if method == HttpMethod.DELETE:
        return HttpRequest.delete(args.endpoint, headers)
    return HttpRequest.get(args.endpoint, headers)


def build_watcher(args: argparse.Namespace) -> WebWatcher:
    def configure(config: Configurator) -> None:
        if args.timeout is not None:
            config.with_timeout(args.timeout)
        if args.skip_status:
            config.skip_status_code_validation()
        if args.expect_text:
            expected = args.expect_text
            config.ensure_that(lambda response: expected in response.data)

    return WebWatcher.create(
        args.url, build_request(args), configure, name=args.name, group=args.group,
    )


def print_result(result: WebWatcherCheckResult) -> None:
    style = "bold green" if result.is_valid else "bold red"
    verdict = "VALID" if result.is_valid else "INVALID"
    console.print(Panel(result.description, title=f"{result.watcher_name}: {verdict}", style=style))

    response: HttpResponse | None = result.response
    if response is None:
        return
    table = Table(show_header=False)
    table.add_row("Status", f"{response.status_code} {response.reason_phrase}")
    for name, value in response.headers.items():
        table.add_row(name, value)
    console.print(table)


async def run_check(watcher: WebWatcher) -> WebWatcherCheckResult:
    try:
        return await watcher.execute()
    finally:
        await watcher.aclose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Web endpoint watcher")
    sub = parser.add_subparsers(dest="command")

    check = sub.add_parser("check", help="Run a single check against a URL")
    check.add_argument("url", help="Base URL of the watched endpoint")
    check.add_argument("--endpoint", default="", help="Path appended to the base URL")
    check.add_argument("--method", default="GET", choices=[m.value for m in HttpMethod],
                       type=str.upper)
    check.add_argument("--data", help="JSON body for POST/PUT")
    check.add_argument("--header", action="append", help="NAME:VALUE, repeatable")
    check.add_argument("--timeout", type=float, help="Timeout in seconds")
    check.add_argument("--skip-status", action="store_true",
                       help="Accept any status code")
    check.add_argument("--expect-text", help="Require this text in the response body")
    check.add_argument("--name", default=DEFAULT_NAME)
    check.add_argument("--group", default=None)
    check.add_argument("--json", action="store_true", help="Print the result as JSON")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    if args.command != "check":
        parser.print_help()
        return EXIT_ERROR

    try:
        watcher = build_watcher(args)
    except (ConfigurationError, json.JSONDecodeError) as e:
        console.print(f"[bold red]Invalid configuration:[/bold red] {e}")
        return EXIT_ERROR

    try:
        result = asyncio.run(run_check(watcher))
    except WatcherExecutionError as e:
        console.print(f"[bold red]{e}[/bold red]\n[dim]{type(e.cause).__name__}: {e.cause}[/dim]")
        return EXIT_ERROR

    if args.json:
        console.print_json(json.dumps(result.to_dict()))
    else:
        print_result(result)
    return EXIT_VALID if result.is_valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
