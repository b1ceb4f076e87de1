"""Policies governing asset class lifecycle."""

from portfolio_tracker.domain.models import AssetClass


def is_selectable(asset_class: AssetClass) -> bool:
    """Return True when the class may be chosen for new transactions."""
    return asset_class.is_active


def can_delete_asset_class(reference_count: int) -> bool:
    """Return True when no transaction references the class.

    Deletion is restricted rather than cascaded; inactive classes keep
    labelling the transactions recorded under them.
    """
    return reference_count == 0


__all__ = ["is_selectable", "can_delete_asset_class"]
