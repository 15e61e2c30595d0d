"""Stdio transport server for local MCP clients.

Usage:
    python -m erply_api.stdio_server

Environment Variables (required):
    ERPLY_CLIENT_CODE - Erply account number

Environment Variables (optional):
    ERPLY_SESSION_KEY - Session key from verifyUser
    ERPLY_PARTNER_KEY - Partner key, when the account requires one
    ERPLY_BASE_URL - API URL (defaults to https://<client code>.erply.com/api/)
    MCP_LOG_LEVEL - Logging level (default: INFO)
    MCP_LOG_FILE - Log file path with rotation
"""

from .server import server


def main():
    """Run the MCP server using stdio transport."""
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
