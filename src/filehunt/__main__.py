"""Entry point for `python -m filehunt` → Start MCP server."""

from filehunt import main

if __name__ == "__main__":
    main()
