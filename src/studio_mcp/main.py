"""CLI startup entrypoint for Studio MCP."""

from __future__ import annotations

import asyncio

import typer
from rich import print

from studio_mcp import tools
from studio_mcp.config import settings
from studio_mcp.telemetry import configure_logging
from studio_mcp.transport import StudioSocketClient

app = typer.Typer(help="Studio MCP service entrypoint")


@app.command()
def start() -> None:
    """Show effective runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "socket_url": settings.socket_url,
            "connection_mode": settings.connection_mode,
            "request_timeout_ms": settings.request_timeout_ms,
            "screenshot_timeout_ms": settings.screenshot_timeout_ms,
            "log_level": settings.log_level,
            "log_dir": str(settings.log_dir) if settings.log_dir else None,
        }
    )


@app.command()
def serve() -> None:
    """Run the MCP server over stdio."""
    from studio_mcp.server import create_server

    configure_logging(settings.log_level, settings.log_dir)
    create_server(settings).run()


@app.command()
def ping(message: str = typer.Option("test", help="Message echoed back by the peer")) -> None:
    """Send one ping to the configured peer and report the result."""
    configure_logging(settings.log_level, settings.log_dir)

    async def _run() -> str:
        async with StudioSocketClient.from_settings(settings) as client:
            return await tools.ping(client, message)

    result = asyncio.run(_run())
    print({"ping": result})
    if not result.startswith("✅"):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
