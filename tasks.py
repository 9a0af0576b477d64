"""Invoke tasks for Storefront application management."""

import sys

from invoke import task
from invoke.context import Context


@task
def start(ctx: Context, host: str = "", port: int = 0, reload: bool = False) -> None:
    """Start the Storefront FastAPI server.

    Host, port and reload default to the [server] section of config.toml.

    Args:
        ctx: Invoke context
        host: Host to bind to (default: server.host)
        port: Port to bind to (default: server.port)
        reload: Enable auto-reload for development (default: server.debug)
    """
    from storefront.config import settings

    host = host or settings.host
    port = port or settings.port

    cmd = f"uv run uvicorn storefront.main:app --host {host} --port {port}"
    if reload or settings.debug:
        cmd += " --reload"

    try:
        ctx.run(cmd, pty=True)
    except KeyboardInterrupt:
        print("\nServer stopped")
        sys.exit(0)


@task
def test(ctx: Context, verbose: bool = False, coverage: bool = False) -> None:
    """Run the test suite.

    Args:
        ctx: Invoke context
        verbose: Enable verbose output
        coverage: Run with coverage report
    """
    cmd = "uv run pytest"
    if verbose:
        cmd += " -v"
    if coverage:
        cmd += " --cov=storefront --cov-report=term-missing"
    ctx.run(cmd, pty=True)


@task(name="import")
def import_products(ctx: Context, path: str, dry_run: bool = False) -> None:
    """Import products from a CSV or JSON file.

    Args:
        ctx: Invoke context
        path: Product file to import
        dry_run: Validate rows without writing to the database
    """
    cmd = f"uv run storefront-import run {path}"
    if dry_run:
        cmd += " --dry-run"
    ctx.run(cmd, pty=True)


@task
def template(ctx: Context, fmt: str = "csv", output: str = "") -> None:
    """Write a sample import file.

    Args:
        ctx: Invoke context
        fmt: csv or json
        output: Output path (default: stdout)
    """
    cmd = f"uv run storefront-import template {fmt}"
    if output:
        cmd += f" --output {output}"
    ctx.run(cmd)


@task
def clean(ctx: Context) -> None:
    """Clean up temporary files."""
    for pattern in ["__pycache__", "*.pyc", "*.pyo", ".pytest_cache"]:
        ctx.run(f"find . -name '{pattern}' -exec rm -rf {{}} + 2>/dev/null || true", warn=True)

    for path in ["build", "dist", "*.egg-info", ".eggs"]:
        ctx.run(f"rm -rf {path} 2>/dev/null || true", warn=True)

    print("Cleanup complete")
