"""
Sort key resolution for list queries.

Each entity declares a closed set of sortable columns. A requested key is matched
case-insensitively with underscores ignored, so ``FirstName``, ``first_name`` and
``firstname`` all select the same column; appending ``desc`` reverses the order.
Unknown or missing keys fall back to the entity's default column, ascending.
"""

import logging
from typing import Dict, List, Optional, Tuple

from constants import SortConfig

logger = logging.getLogger(__name__)


def normalize_sort_key(key: str) -> str:
    """Lower-case a sort key and drop underscores, dashes and spaces."""
    return "".join(ch for ch in key.lower() if ch not in "_- ")


class SortMap:
    """
    Closed mapping of sort keys to model columns.

    Args:
        columns: Sort key -> mapped model attribute
        default: Key used when the requested key is absent or unknown
        tie_breaker: Column appended ascending to every ordering (usually the id)
    """

    def __init__(self, columns: Dict[str, object], default: str, tie_breaker):
        self.columns = {normalize_sort_key(key): column for key, column in columns.items()}
        self.default = normalize_sort_key(default)
        if self.default not in self.columns:
            raise ValueError(f"Default sort key '{default}' is not one of {sorted(self.columns)}")
        self.tie_breaker = tie_breaker

    @property
    def keys(self) -> List[str]:
        """All accepted normalized keys, ascending and descending."""
        accepted = []
        for key in self.columns:
            accepted.append(key)
            accepted.append(f"{key}{SortConfig.DESCENDING_SUFFIX}")
        return accepted

    def resolve(self, order_by: Optional[str]) -> Tuple[str, bool]:
        """
        Resolve a requested key to (column key, descending).

        Args:
            order_by: Requested sort key, may be None

        Returns:
            Tuple of normalized column key and descending flag
        """
        if not order_by:
            return self.default, False

        key = normalize_sort_key(order_by)
        if key in self.columns:
            return key, False

        suffix = SortConfig.DESCENDING_SUFFIX
        if key.endswith(suffix) and key[:-len(suffix)] in self.columns:
            return key[:-len(suffix)], True

        logger.debug(
            f"Unknown sort key '{order_by}', falling back to '{self.default}' "
            f"(accepted: {', '.join(self.keys)})"
        )
        return self.default, False

    def order_clauses(self, order_by: Optional[str]) -> list:
        """
        Build ORDER BY clauses for a requested key.

        Returns:
            List of SQLAlchemy order expressions, tie breaker last
        """
        key, descending = self.resolve(order_by)
        column = self.columns[key]
        primary = column.desc() if descending else column.asc()
        if column is self.tie_breaker:
            return [primary]
        return [primary, self.tie_breaker.asc()]
