# sizing/models.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Request body of the pump calculator; keys match the front-end form
class PumpRequest(BaseModel):
    # strict: booleans and numeric strings are rejected, ints are accepted as floats
    model_config = ConfigDict(strict=True, allow_inf_nan=False, frozen=True)

    n: float = Field(..., gt=0, description="Speed (rpm)")
    q: float = Field(..., gt=0, description="Flow rate (m3/h)")
    tdhm: float = Field(..., gt=0, description="Total dynamic head (m)")
    npsha: float = Field(..., gt=0, description="NPSH available (m)")
    suctype: float = Field(..., description="Suction type, 1 = single, 2 = double")
    sg: float = Field(..., gt=0, description="Specific gravity")
    num_impellers: float = Field(..., ge=1, description="Number of impellers")
    viscosity: float = Field(..., gt=0, description="Kinematic viscosity (cSt)")

    @field_validator("suctype")
    @classmethod
    def check_suction_type(cls, v: float) -> float:
        if v not in (1, 2):
            raise ValueError("suction type must be 1 or 2")
        return v

    @field_validator("num_impellers")
    @classmethod
    def check_whole_stages(cls, v: float) -> float:
        if not float(v).is_integer():
            raise ValueError("number of impellers must be a whole number")
        return v


class DesignWarning(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    critical: bool


class PerformanceData(BaseModel):
    model_config = ConfigDict(frozen=True)

    flowPoints: List[float]
    headPoints: List[float]
    efficiencyPoints: List[float]
    npshPoints: List[float]
    powerPoints: List[float]
    flowPercentages: List[float]


# Re-estimate for a smaller/different pump at the same duty point
class AlternatePumpEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    flow: float
    head: float
    ns: float
    impdia: float
    npsh: float
    speed: float
    efficiency: float   # %
    hydpower: Optional[float] = None  # kW, None when efficiency is 0


class PumpSizingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    efficiency: float   # %
    uns: float
    ns: float
    unss: float
    nss: float
    phi: float
    angvel: float       # rad/s
    tipspeed: float     # m/s
    impdia: float       # mm
    headstage: float    # m
    hydpower: float     # kW
    reynolds: float
    cq: float
    ch: float
    ce: float
    nstatus: str
    statusText: str
    warnings: List[DesignWarning]
    performanceData: PerformanceData
    newPumpPerformance: Optional[AlternatePumpEstimate] = None
