"""
Shared response models
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class PruneReport:
    """Result of a prune endpoint"""

    deleted: List[Any] = field(default_factory=list)
    space_reclaimed: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], deleted_key: str) -> 'PruneReport':
        """
        Args:
            data: Decoded JSON body (may be None)
            deleted_key: Field holding the deleted items, e.g. 'VolumesDeleted'
        """
        data = data or {}
        return cls(
            deleted=data.get(deleted_key) or [],
            space_reclaimed=data.get('SpaceReclaimed') or 0,
        )
