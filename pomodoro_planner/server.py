"""FastMCP server initialization for Pomodoro Planner."""

from mcp.server.fastmcp import FastMCP

from pomodoro_planner.logging_config import setup_logging

# Initialize the MCP server
mcp = FastMCP("pomodoro_planner")


def run() -> None:
    """Run the MCP server."""
    setup_logging()
    mcp.run()
