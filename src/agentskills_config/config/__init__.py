"""Agent config reading, writing and schema normalization."""

from ._adapters import (
    OpenCodeSchemaAdapter,
    StandardSchemaAdapter,
    VsCodeSchemaAdapter,
    get_schema_adapter,
)
from ._io import (
    atomic_write,
    configure_agent_mcp,
    dump_json,
    load_json,
    read_agent_config,
    write_agent_config,
)
from ._manager import McpConfigManager, make_config_manager
from ._protocols import SchemaAdapter

__all__ = [
    "McpConfigManager",
    "OpenCodeSchemaAdapter",
    "SchemaAdapter",
    "StandardSchemaAdapter",
    "VsCodeSchemaAdapter",
    "atomic_write",
    "configure_agent_mcp",
    "dump_json",
    "get_schema_adapter",
    "load_json",
    "make_config_manager",
    "read_agent_config",
    "write_agent_config",
]
