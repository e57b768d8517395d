"""MCP server exposing structured-data validation as tools."""
