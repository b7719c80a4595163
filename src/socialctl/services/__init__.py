"""Services: user, connection, query and health operations.

Each public method returns a ServiceResult. This package reads from
domain and infrastructure only; commands, output and mcp sit above it.
"""
