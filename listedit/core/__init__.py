"""
Core Module
===========

Event system, configuration, list operations and interaction modes.
"""

# Event System
from .event_bus import EventBus, EventPayload
from . import events

# Domain
from .list_ops import append_item, remove_at, replace_at
from .mode import Mode

# Configuration
from .configuration import (
    ConfigManager,
    EditorConfig,
    SystemConfig,
    ValidationLevel,
    get_config,
    get_config_manager,
)

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "events",
    # Domain
    "append_item",
    "remove_at",
    "replace_at",
    "Mode",
    # Configuration
    "ConfigManager",
    "EditorConfig",
    "SystemConfig",
    "ValidationLevel",
    "get_config",
    "get_config_manager",
]
