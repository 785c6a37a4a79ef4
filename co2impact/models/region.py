from pydantic import BaseModel, ConfigDict, Field


DEFAULT_ENERGY_KWH = 30000.0
DEFAULT_RENEWABLE_SHARE_PCT = 45.0
DEFAULT_GRID_EMISSION_FACTOR = 0.48


class Region(BaseModel):
    """
    One geographic/operational unit of input data.

    Records are immutable; edits go through `with_field`, which returns a
    shallow copy. Values are not range-checked.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        description="Free-form label, not a key (duplicates allowed)"
    )

    energy_kWh: float = Field(
        default=DEFAULT_ENERGY_KWH,
        description="Total energy consumption in kWh"
    )

    renewable_share_pct: float = Field(
        default=DEFAULT_RENEWABLE_SHARE_PCT,
        description="Renewable share, intended in [0, 100]"
    )

    grid_emission_factor_kg_per_kWh: float = Field(
        default=DEFAULT_GRID_EMISSION_FACTOR,
        description="Grid emission factor in kg CO2 per kWh"
    )

    def with_field(self, field: str, value) -> "Region":
        """Copy of this record with one field overridden."""
        return self.model_copy(update={field: value})


EDITABLE_FIELDS = tuple(Region.model_fields)


SEED_REGIONS = (
    Region(id="North", energy_kWh=50000, renewable_share_pct=38, grid_emission_factor_kg_per_kWh=0.45),
    Region(id="South", energy_kWh=42000, renewable_share_pct=55, grid_emission_factor_kg_per_kWh=0.42),
    Region(id="West", energy_kWh=61000, renewable_share_pct=28, grid_emission_factor_kg_per_kWh=0.50),
)
