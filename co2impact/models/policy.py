"""
Policy Pathway Parameters - CO2 Impact Dashboard
co2impact/models/policy.py

PolicyParams holds the three pathway inputs exactly as typed (strings).
They are coerced to PathwayParams only when a pathway request is issued.
No cross-field rule is applied (target_year may precede start_year).
"""

from dataclasses import dataclass, replace
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from co2impact.core.exceptions import PolicyParamsError

PolicyField = Literal["start_year", "target_year", "target_share_pct"]


class PathwayParams(BaseModel):
    """Numeric pathway parameters as sent to the compute service."""

    start_year: int = Field(..., serialization_alias="startYear")
    target_year: int = Field(..., serialization_alias="targetYear")
    target_share_pct: float = Field(
        ...,
        allow_inf_nan=False,
        serialization_alias="targetSharePct",
    )


@dataclass(frozen=True)
class PolicyParams:
    """Raw pathway inputs; each field is set independently."""

    start_year: str = "2025"
    target_year: str = "2030"
    target_share_pct: str = "70"

    def set(self, field: PolicyField, value) -> "PolicyParams":
        if field not in self.__dataclass_fields__:
            raise KeyError(field)
        return replace(self, **{field: str(value)})

    def coerce(self) -> PathwayParams:
        """
        Convert the raw strings to numbers.

        Raises:
            PolicyParamsError: listing every field that is not a valid number.
        """
        try:
            return PathwayParams(
                start_year=self.start_year.strip(),
                target_year=self.target_year.strip(),
                target_share_pct=self.target_share_pct.strip(),
            )
        except ValidationError as e:
            fields = [str(err["loc"][0]) for err in e.errors()]
            raise PolicyParamsError(fields) from e
