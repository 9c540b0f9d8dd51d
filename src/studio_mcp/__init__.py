"""Studio MCP: drive a KKStudioSocket scene editor from MCP tool calls."""

__version__ = "0.1.0"
