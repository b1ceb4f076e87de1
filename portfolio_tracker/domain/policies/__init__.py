"""Domain policies package."""

from .asset_class_policy import can_delete_asset_class, is_selectable

__all__ = ["can_delete_asset_class", "is_selectable"]
