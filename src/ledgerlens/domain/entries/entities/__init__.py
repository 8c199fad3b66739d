"""Entities for the entries domain."""

from ledgerlens.domain.entries.entities.unified_entry import UnifiedEntry

__all__ = ["UnifiedEntry"]
