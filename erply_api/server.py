"""MCP server for Erply: tool registration."""

from __future__ import annotations

from fastmcp import FastMCP

from .resources import (
    auth as auth_tools,
    prices,
    suppliers,
)
from .utils.logging import setup_logging

setup_logging()


def create_mcp_server():
    """Create and configure the FastMCP server with all tools."""
    mcp = FastMCP("mcp-erply")

    # -- Tools: session -----------------------------------------------------
    mcp.tool()(auth_tools.erply_status)
    mcp.tool()(auth_tools.erply_service_endpoints)

    # -- Tools: suppliers ---------------------------------------------------
    mcp.tool()(suppliers.erply_suppliers)
    mcp.tool()(suppliers.erply_save_supplier)
    mcp.tool()(suppliers.erply_save_suppliers_bulk)
    mcp.tool()(suppliers.erply_delete_supplier)

    # -- Tools: supplier price lists ----------------------------------------
    mcp.tool()(prices.erply_supplier_price_lists)
    mcp.tool()(prices.erply_price_list_products)
    mcp.tool()(prices.erply_change_price_list_products_bulk)
    mcp.tool()(prices.erply_save_price_list)

    return mcp


# Default server instance for stdio transport
server = create_mcp_server()
