"""Configuration for list field behavior.

Provides hooks for applications to customize list field defaults.
"""

from typing import Dict, Optional
from dataclasses import dataclass, field


@dataclass
class ListFieldConfig:
    """Base configuration for list fields.

    Applications can subclass this to provide custom configuration.

    Attributes:
        default_entity: Singular noun for items when the schema has no entity
        default_item_count: Items created when neither defaultNum nor min is set
        messages: Message templates overriding the built-in English catalog
    """

    default_entity: str = "item"
    default_item_count: int = 1
    messages: Dict[str, str] = field(default_factory=dict)


# Global config instance (set by application)
_list_config: Optional[ListFieldConfig] = None


def set_list_config(config: Optional[ListFieldConfig]) -> None:
    """Set the global list field configuration.

    Args:
        config: ListFieldConfig instance, or None to restore defaults
    """
    global _list_config
    _list_config = config


def get_list_config() -> ListFieldConfig:
    """Get the current list field configuration.

    Returns:
        Current ListFieldConfig or default if not set
    """
    if _list_config is None:
        return ListFieldConfig()
    return _list_config
