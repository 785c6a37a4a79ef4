"""
Region Store - CO2 Impact Dashboard
co2impact/state/region_store.py

Ordered, copy-on-write collection of Region records.

Every mutation builds a new tuple and rebinds it; tuples handed out by
`snapshot` (or returned from add/update/remove) are never modified.

Aggregates are recomputed from the current snapshot on every read:
    total_energy = Σ energy_kWh
    avg_share    = Σ renewable_share_pct / count, one decimal, half-up
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Iterator, Optional, Tuple

import structlog

from co2impact.core.exceptions import RegionFieldError
from co2impact.models.region import EDITABLE_FIELDS, Region

logger = structlog.get_logger(__name__)

Snapshot = Tuple[Region, ...]


class RegionStore:
    """In-memory ordered region collection producing immutable snapshots."""

    def __init__(self, regions: Iterable[Region] = ()):
        self._regions: Snapshot = tuple(regions)

    @property
    def snapshot(self) -> Snapshot:
        return self._regions

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self) -> Snapshot:
        """
        Append a region with default values.

        The id is derived from the current count (`R<n+1>`), not from a
        monotonic counter, so it can repeat after removals.
        """
        region = Region(id=f"R{len(self._regions) + 1}")
        self._regions = self._regions + (region,)
        logger.debug("region_added", region_id=region.id, count=len(self._regions))
        return self._regions

    def update(self, index: int, field: str, value) -> Snapshot:
        """Replace the record at `index` with a copy overriding `field`."""
        self._check_index(index)
        if field not in EDITABLE_FIELDS:
            raise RegionFieldError(field)
        updated = self._regions[index].with_field(field, value)
        self._regions = self._regions[:index] + (updated,) + self._regions[index + 1:]
        return self._regions

    def remove(self, index: int) -> Snapshot:
        """Drop the record at `index`, keeping the others in order."""
        self._check_index(index)
        removed = self._regions[index]
        self._regions = self._regions[:index] + self._regions[index + 1:]
        logger.debug("region_removed", region_id=removed.id, count=len(self._regions))
        return self._regions

    def _check_index(self, index: int) -> None:
        # Negative indices would silently wrap on a tuple
        if not 0 <= index < len(self._regions):
            raise IndexError(
                f"region index {index} out of range for {len(self._regions)} region(s)"
            )

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    @property
    def total_energy(self) -> float:
        return sum(r.energy_kWh for r in self._regions)

    @property
    def avg_share(self) -> Optional[str]:
        """Mean renewable share to one decimal place, or None for an empty store."""
        if not self._regions:
            return None
        mean = sum(r.renewable_share_pct for r in self._regions) / len(self._regions)
        return str(Decimal(str(mean)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
