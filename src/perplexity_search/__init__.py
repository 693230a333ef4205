"""MCP server answering search_web calls with Perplexity, escalating model tiers."""

__all__ = ["main"]


def main() -> None:
    """Entry point for the MCP server."""
    from .server import main as _main

    _main()
