"""Server entry point: ``python -m hcv.core.server.main`` or ``hcv-server``."""

from __future__ import annotations

import logging
from ipaddress import ip_address

from hcv.core.config.settings import Settings, get_settings
from hcv.core.server.app import create_app

logger = logging.getLogger(__name__)


def _is_loopback_host(host: str) -> bool:
    if host == "localhost":
        return True
    try:
        return ip_address(host).is_loopback
    except ValueError:
        return False


def check_bind_host(settings: Settings) -> None:
    """Refuse a non-loopback bind unless explicitly allowed.

    The server hands out personal health records and has no auth layer.

    Raises:
        RuntimeError: ``HCV_HOST`` is not loopback and
            ``HCV_ALLOW_INSECURE_BIND`` is false.
    """
    if _is_loopback_host(settings.hcv_host):
        return
    if not settings.hcv_allow_insecure_bind:
        raise RuntimeError(
            f"Refusing to expose health records on non-loopback host "
            f"{settings.hcv_host!r} without an auth layer. "
            "Set HCV_ALLOW_INSECURE_BIND=true to override (unsafe)."
        )
    logger.warning(
        "Serving health records on non-loopback host %s with no auth layer",
        settings.hcv_host,
    )


def describe_connector(settings: Settings) -> str:
    """One-line summary of the configured health connector for the startup log."""
    if settings.health_connector == "export":
        path = settings.health_connect_export_path or "<unset, mock fallback>"
        return f"export ({path})"
    return settings.health_connector


def run() -> None:
    """Start the Health Connect viewer over Streamable HTTP."""
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.hcv_log_level.upper(), logging.INFO))

    check_bind_host(settings)
    logger.info(
        "Starting Health Connect viewer on %s:%d (connector: %s)",
        settings.hcv_host,
        settings.hcv_port,
        describe_connector(settings),
    )

    mcp = create_app()
    mcp.run(
        transport="streamable-http",
        host=settings.hcv_host,
        port=settings.hcv_port,
    )


if __name__ == "__main__":
    run()
