"""
Configuration

All settings come from environment variables with sensible defaults:
- PORT: HTTP server port (default: 5003)
- HOST: HTTP server bind address (default: 127.0.0.1)
- FPDS_UX_HTTP_PORT: streamable-http MCP server port (default: 6661)
- FPDS_UX_HTTP_HOST: streamable-http MCP server bind address (default: 0.0.0.0)
- FPDS_FEED_URL: Atom feed endpoint
- FPDS_USER_AGENT: User-Agent sent to FPDS (default: Mozilla/5.0)
- FPDS_TIMEOUT_SECONDS: Outbound request timeout (default: 15)
- FPDS_DEFAULT_WINDOW_DAYS: Recency window when no dates are given (default: 365, 0 disables)
- FPDS_STRICT_ERRORS: Return HTTP 500 instead of 200 for failed searches (default: false)
"""
import os
from dataclasses import dataclass

from .core.query import DEFAULT_FEED_URL
from .core.services import DEFAULT_USER_AGENT

DEFAULT_PORT = 5003
DEFAULT_HOST = "127.0.0.1"
DEFAULT_MCP_PORT = 6661
DEFAULT_MCP_HOST = "0.0.0.0"
DEFAULT_TIMEOUT_SECONDS = 15.0
DEFAULT_WINDOW_DAYS = 365

_TRUE = {"1", "true", "yes", "on"}


def get_port() -> int:
    """Get server port from environment or use default"""
    port_str = os.environ.get("PORT", str(DEFAULT_PORT))
    try:
        return int(port_str)
    except ValueError:
        msg = f"Invalid PORT value: {port_str}"
        raise ValueError(msg) from None


def get_host() -> str:
    return os.environ.get("HOST", DEFAULT_HOST)


def get_mcp_port() -> int:
    """Get streamable-http MCP server port from environment or use default"""
    port_str = os.environ.get("FPDS_UX_HTTP_PORT", str(DEFAULT_MCP_PORT))
    try:
        return int(port_str)
    except ValueError:
        msg = f"Invalid FPDS_UX_HTTP_PORT value: {port_str}"
        raise ValueError(msg) from None


def get_mcp_host() -> str:
    return os.environ.get("FPDS_UX_HTTP_HOST", DEFAULT_MCP_HOST)


def get_feed_url() -> str:
    return os.environ.get("FPDS_FEED_URL", DEFAULT_FEED_URL)


def get_user_agent() -> str:
    """Get user agent from environment or use default"""
    return os.environ.get("FPDS_USER_AGENT", DEFAULT_USER_AGENT)


def get_timeout() -> float:
    """Get outbound request timeout in seconds"""
    timeout_str = os.environ.get("FPDS_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
    try:
        timeout = float(timeout_str)
    except ValueError:
        msg = f"Invalid FPDS_TIMEOUT_SECONDS value: {timeout_str}"
        raise ValueError(msg) from None
    if timeout <= 0:
        raise ValueError(f"FPDS_TIMEOUT_SECONDS must be positive, got {timeout_str}")
    return timeout


def get_default_window_days() -> int:
    window_str = os.environ.get("FPDS_DEFAULT_WINDOW_DAYS", str(DEFAULT_WINDOW_DAYS))
    try:
        return int(window_str)
    except ValueError:
        msg = f"Invalid FPDS_DEFAULT_WINDOW_DAYS value: {window_str}"
        raise ValueError(msg) from None


def get_strict_errors() -> bool:
    return os.environ.get("FPDS_STRICT_ERRORS", "").strip().lower() in _TRUE


@dataclass(frozen=True)
class Settings:
    feed_url: str = DEFAULT_FEED_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    default_window_days: int = DEFAULT_WINDOW_DAYS
    strict_errors: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            feed_url=get_feed_url(),
            user_agent=get_user_agent(),
            timeout=get_timeout(),
            default_window_days=get_default_window_days(),
            strict_errors=get_strict_errors()
        )
