"""MCP tools. Importing a module registers its tools on the shared app."""
