"""Server command."""

import sys

import cyclopts
import uvicorn

from smog.cli.console import get_console
from smog.config import Config
from smog.domain.shared.error import ConfigurationError

app = cyclopts.App(name="serve", help="Run the HTTP server")


@app.default
def serve(host: str | None = None, port: int | None = None, reload: bool = False) -> None:
    """Run the polluted cities API in the foreground.

    Args:
        host: Host to bind to. Defaults to the configured server host.
        port: Port to listen on. Defaults to SMOG_SERVER__PORT, then $PORT, then 3000.
        reload: Restart on code changes (development only).
    """
    try:
        config = Config()  # type: ignore[call-arg]
    except ConfigurationError as e:
        get_console().error(e.message, hint="Set SMOG_SERVER__PORT or a numeric PORT")
        sys.exit(1)

    uvicorn.run(
        "smog.application.api.rest.app:create_app",
        factory=True,
        host=host or config.server.host,
        port=port or config.server.port,
        reload=reload,
        log_config=None,  # Logging is configured by create_app
    )
