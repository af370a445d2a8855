from .status_badge import StatusBadge

__all__ = ["StatusBadge"]
