"""Exchange free/busy MCP Server.

Exposes the EWS GetUserAvailability operation as an MCP tool.
Uses FastMCP with a lifespan context manager to share a single EWSClient
instance across all tool invocations.
"""

import logging
import os
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from mcp.server.fastmcp import FastMCP

from exchange_freebusy.ews_client import EWSClient

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Shared application state available to all tools via lifespan context."""
    client: EWSClient


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Initialize the EWS client on startup, available for the server lifetime."""
    client = EWSClient()
    logger.info("Using EWS endpoint %s", client.ews_url)
    yield AppContext(client=client)


# Create the MCP server instance
mcp = FastMCP("exchange-freebusy", lifespan=app_lifespan)

# Import tool modules so their @mcp.tool() decorators register tools.
import exchange_freebusy.tools.availability  # noqa: E402, F401


def main():
    """Entry point: run the MCP server over stdio."""
    # stdout carries the MCP protocol
    logging.basicConfig(
        level=os.environ.get("EXCHANGE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    mcp.run()


if __name__ == "__main__":
    main()
