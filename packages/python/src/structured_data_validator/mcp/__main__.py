"""Run the structured-data-validator MCP server.

Usage::

    python -m structured_data_validator.mcp          # stdio
    python -m structured_data_validator.mcp --http   # streamable HTTP
    python -m structured_data_validator.mcp --sse    # server-sent events
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

TRANSPORT_FLAGS = {
    "--http": "streamable-http",
    "--sse": "sse",
}
DEFAULT_TRANSPORT = "stdio"


def select_transport(argv: Sequence[str]) -> str:
    """Transport named by the first recognised flag in *argv*."""
    for arg in argv:
        if arg in TRANSPORT_FLAGS:
            return TRANSPORT_FLAGS[arg]
    return DEFAULT_TRANSPORT


def main(argv: Optional[Sequence[str]] = None) -> None:
    from structured_data_validator.mcp.server import mcp

    mcp.run(transport=select_transport(sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":
    main()
