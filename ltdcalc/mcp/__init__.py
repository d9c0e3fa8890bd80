"""MCP server exposing the ltd-calc engine as tools."""
