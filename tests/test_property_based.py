# tests/test_property_based.py
"""
Property-Based Tests - RegionStore and AsyncSlot

Covers:
  - snapshot immutability across arbitrary add/update/remove sequences
  - remove(i) length and order law
  - aggregate consistency with the current snapshot
  - stale-data law for failed runs
"""

import asyncio
import math
from fractions import Fraction

from hypothesis import given, settings
from hypothesis import strategies as st

from co2impact.models.region import Region
from co2impact.state.async_slot import AsyncSlot
from co2impact.state.region_store import RegionStore

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------

number_st = st.floats(min_value=0.0, max_value=1e6, allow_nan=False, allow_infinity=False)
share_st = st.floats(min_value=0.0, max_value=100.0, allow_nan=False, allow_infinity=False)


@st.composite
def region_st(draw):
    return Region(
        id=draw(st.text(min_size=1, max_size=8)),
        energy_kWh=draw(number_st),
        renewable_share_pct=draw(share_st),
        grid_emission_factor_kg_per_kWh=draw(st.floats(min_value=0.0, max_value=2.0)),
    )


@st.composite
def operation_st(draw):
    kind = draw(st.sampled_from(["add", "update", "remove"]))
    if kind == "update":
        field = draw(st.sampled_from(["id", "energy_kWh", "renewable_share_pct"]))
        value = draw(st.text(max_size=8)) if field == "id" else draw(share_st)
        return ("update", draw(st.integers(min_value=0, max_value=20)), field, value)
    if kind == "remove":
        return ("remove", draw(st.integers(min_value=0, max_value=20)))
    return ("add",)


def _apply(store, op):
    """Apply op, skipping index-based ops that would be out of range."""
    if op[0] == "add":
        store.add()
    elif not len(store):
        return
    elif op[0] == "update":
        store.update(op[1] % len(store), op[2], op[3])
    else:
        store.remove(op[1] % len(store))


# ---------------------------------------------------------------------------
# RegionStore properties
# ---------------------------------------------------------------------------


class TestRegionStoreProperties:

    @given(st.lists(region_st(), max_size=6), st.lists(operation_st(), max_size=25))
    @settings(max_examples=200)
    def test_previous_snapshots_never_change(self, initial, ops):
        """Every snapshot taken along the way keeps its contents."""
        store = RegionStore(initial)
        held = []
        for op in ops:
            snap = store.snapshot
            held.append((snap, [r.model_dump() for r in snap]))
            _apply(store, op)
        for snap, dumped in held:
            assert [r.model_dump() for r in snap] == dumped

    @given(st.lists(region_st(), min_size=1, max_size=10), st.data())
    @settings(max_examples=200)
    def test_remove_drops_exactly_one(self, initial, data):
        store = RegionStore(initial)
        i = data.draw(st.integers(min_value=0, max_value=len(initial) - 1))
        snap = store.remove(i)
        assert len(snap) == len(initial) - 1
        assert list(snap) == initial[:i] + initial[i + 1:]

    @given(st.lists(region_st(), min_size=1, max_size=10))
    @settings(max_examples=200)
    def test_total_energy_matches_snapshot(self, initial):
        store = RegionStore(initial)
        assert store.total_energy == sum(r.energy_kWh for r in initial)

    @given(st.lists(st.integers(min_value=0, max_value=100), min_size=1, max_size=10))
    @settings(max_examples=300)
    def test_avg_share_rounds_half_up(self, shares):
        store = RegionStore(
            Region(id=f"R{i}", renewable_share_pct=s) for i, s in enumerate(shares)
        )
        # Exact rational mean, halves rounded away from zero
        tenths = math.floor(Fraction(sum(shares), len(shares)) * 10 + Fraction(1, 2))
        assert store.avg_share == f"{tenths // 10}.{tenths % 10}"

    @given(st.lists(region_st(), min_size=1, max_size=10), st.data())
    @settings(max_examples=200)
    def test_update_with_same_value_is_idempotent(self, initial, data):
        store = RegionStore(initial)
        i = data.draw(st.integers(min_value=0, max_value=len(initial) - 1))
        field = data.draw(st.sampled_from(list(Region.model_fields)))
        before = store.snapshot
        after = store.update(i, field, getattr(before[i], field))
        assert after == before


# ---------------------------------------------------------------------------
# AsyncSlot properties
# ---------------------------------------------------------------------------


class TestAsyncSlotProperties:

    @given(st.lists(st.one_of(st.integers(), st.text(min_size=1)), max_size=10))
    @settings(max_examples=100)
    def test_data_is_last_success(self, outcomes):
        """ints succeed, strings fail with that message; data tracks the last int."""

        async def scenario():
            slot = AsyncSlot("dashboard")
            for outcome in outcomes:
                async def op(o=outcome):
                    if isinstance(o, str):
                        raise RuntimeError(o)
                    return o
                await slot.run(op())
            return slot

        slot = asyncio.run(scenario())
        successes = [o for o in outcomes if isinstance(o, int)]
        assert slot.data == (successes[-1] if successes else None)
        assert slot.loading is False
        if outcomes and isinstance(outcomes[-1], str):
            assert slot.err == outcomes[-1]
        else:
            assert slot.err is None
