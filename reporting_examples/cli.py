#!/usr/bin/env python3
"""
Reporting Examples CLI - serve the demo API and run its utilities locally.

This module provides the command-line interface using Click.
"""

import sys
from typing import Optional

import click
import requests
import uvicorn
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from reporting_examples.config import settings
from reporting_examples.core.calculator import Calculator
from reporting_examples.core.data_processor import DataProcessor
from reporting_examples.core.errors import ReportingError

# Initialize rich console
console = Console()

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])

BINARY_OPERATIONS = ['add', 'subtract', 'multiply', 'divide', 'power']
UNARY_OPERATIONS = ['sqrt', 'factorial', 'isPrime']


class Context:
    """Shared context for CLI commands."""

    def __init__(self):
        self.calculator: Calculator = Calculator()
        self.verbose: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)


def _parse_number(value: str):
    """Parse an int when possible, otherwise a float."""
    try:
        return int(value)
    except ValueError:
        return float(value)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@pass_context
def cli(ctx: Context, verbose: bool):
    """
    Reporting Examples: demo API for test-reporting tooling.

    Examples:

        reporting-examples server --port 3000

        reporting-examples calc divide 10 4

        reporting-examples stats 1 2 2 3 4
    """
    ctx.verbose = verbose


# ============================================================================
# CALC COMMAND
# ============================================================================

@cli.command()
@click.argument('operation', type=click.Choice(BINARY_OPERATIONS + UNARY_OPERATIONS))
@click.argument('operands', nargs=-1, required=True)
@pass_context
def calc(ctx: Context, operation: str, operands):
    """
    Run a calculator operation.

    Examples:

        reporting-examples calc add 2 3

        reporting-examples calc factorial 5
    """
    expected = 2 if operation in BINARY_OPERATIONS else 1
    if len(operands) != expected:
        console.print(f"[bold red]✗ Error:[/bold red] {operation} takes {expected} operand(s)")
        sys.exit(2)

    try:
        values = [_parse_number(value) for value in operands]
    except ValueError:
        console.print(f"[bold red]✗ Error:[/bold red] operands must be numbers: {' '.join(operands)}")
        sys.exit(2)

    method = getattr(ctx.calculator, 'is_prime' if operation == 'isPrime' else operation)
    try:
        result = method(*values)
    except ReportingError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e.message}")
        sys.exit(1)

    console.print(f"[bold]{operation}[/bold]({', '.join(operands)}) = [green]{result}[/green]")


# ============================================================================
# STATS COMMAND
# ============================================================================

@cli.command()
@click.argument('numbers', nargs=-1)
@pass_context
def stats(ctx: Context, numbers):
    """
    Summary statistics for a list of numbers.

    Examples:

        reporting-examples stats 1 3 5 7 9
    """
    try:
        values = [_parse_number(value) for value in numbers]
    except ValueError:
        console.print("[bold red]✗ Error:[/bold red] all values must be numbers")
        sys.exit(2)

    summary = DataProcessor.process_array(values)

    table = Table(title="Statistics", box=box.ROUNDED)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    for metric, value in summary.items():
        table.add_row(metric, "-" if value is None else str(value))

    console.print()
    console.print(table)
    console.print()


# ============================================================================
# HEALTH COMMAND
# ============================================================================

@cli.command()
@click.option('--url', '-u', default=None, help='Base URL of a running server')
@click.option('--timeout', '-t', default=2.0, type=float, help='Request timeout in seconds')
@pass_context
def health(ctx: Context, url: Optional[str], timeout: float):
    """
    Check the health of a running API server.

    Examples:

        reporting-examples health --url http://localhost:3000
    """
    base_url = url or f"http://localhost:{settings.port}"

    try:
        response = requests.get(f"{base_url.rstrip('/')}/health", timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        console.print(f"[bold red]✗ Server not reachable:[/bold red] {e}")
        sys.exit(1)

    data = response.json()
    console.print(Panel.fit(
        f"[bold green]Status:[/bold green] {data.get('status')}\n"
        f"[bold]Uptime:[/bold] {data.get('uptime', 0):.1f}s\n"
        f"[bold]Timestamp:[/bold] {data.get('timestamp')}",
        title=base_url,
        border_style="green"
    ))


# ============================================================================
# SERVER COMMAND
# ============================================================================

@cli.command()
@click.option('--host', '-H', default=settings.host, help='Host to bind to')
@click.option('--port', '-p', default=settings.port, type=int, help='Port to bind to')
@click.option('--reload', '-r', is_flag=True, help='Enable auto-reload')
@pass_context
def server(ctx: Context, host: str, port: int, reload: bool):
    """
    Start the FastAPI server.

    Examples:

        reporting-examples server

        reporting-examples server --port 9000 --reload
    """
    console.print()
    console.print(Panel.fit(
        "[bold cyan]Starting Reporting Examples API Server[/bold cyan]",
        border_style="cyan"
    ))
    console.print()

    console.print(f"[bold]Host:[/bold] {host}")
    console.print(f"[bold]Port:[/bold] {port}")
    console.print(f"[bold]Reload:[/bold] {'Enabled' if reload else 'Disabled'}")
    console.print()
    console.print(f"[dim]Documentation:[/dim] http://{host}:{port}/docs")
    console.print(f"[dim]Health Check:[/dim] http://{host}:{port}/health")
    console.print()

    try:
        uvicorn.run(
            "reporting_examples.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=settings.log_level.lower()
        )
    except KeyboardInterrupt:
        console.print()
        console.print("[yellow]Server stopped by user[/yellow]")
    except Exception as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        if ctx.verbose:
            console.print_exception()
        sys.exit(1)


# ============================================================================
# Main Entry Point
# ============================================================================

def main():
    """Main entry point for the CLI."""
    cli(obj=Context())


if __name__ == '__main__':
    main()
