# sizing/core/pump.py
import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from sizing.core.classification import DesignCheck, classify_ns, evaluate_warnings
from sizing.core.constants import (
    GRAVITY,
    SECONDS_PER_HOUR,
    US_FLOW_FACTOR,
    US_NS_FACTOR,
    UNITLESS_NS_DIVISOR,
    HYDRAULIC_POWER_DIVISOR,
    EFF_BASE,
    EFF_FLOW_COEFF,
    EFF_FLOW_EXPONENT,
    EFF_NS_COEFF,
    EFF_NS_REFERENCE,
    EFF_STAGE_PENALTY,
    PHI_NUMERATOR,
    VISCOUS_HEAD,
    VISCOUS_EFFICIENCY,
    VISCOUS_FLOW,
    ALT_EFFICIENCY_DROP,
    ALT_EFFICIENCY_POLY,
)
from sizing.core.curves import build_performance_curve, evaluate_polynomial
from sizing.errors import ComputationFault, from_pydantic
from sizing.models import AlternatePumpEstimate, PumpRequest, PumpSizingResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimilarityParameters:
    head_per_stage: float   # m
    angular_velocity: float  # rad/s
    ns: float
    uns: float
    nss: float
    unss: float


@dataclass(frozen=True)
class GeometrySizing:
    phi: float
    outer_radius: float     # m
    impeller_diameter: float  # mm
    tip_speed: float        # m/s


@dataclass(frozen=True)
class ViscousCorrection:
    cq: float
    ch: float
    ce: float


def compute_similarity(req: PumpRequest) -> SimilarityParameters:
    """
    Per-stage head, angular velocity, specific speed and suction specific speed.
    """
    head_stage = req.tdhm / req.num_impellers
    ang_vel = (math.pi / 30) * req.n

    ns = req.n * math.sqrt(req.q / SECONDS_PER_HOUR) / head_stage ** 0.75
    nss = req.n * math.sqrt((req.q / req.suctype) / SECONDS_PER_HOUR) / req.npsha ** 0.75

    return SimilarityParameters(
        head_per_stage=head_stage,
        angular_velocity=ang_vel,
        ns=ns,
        uns=ns / UNITLESS_NS_DIVISOR,
        nss=nss,
        unss=nss / UNITLESS_NS_DIVISOR,
    )


def flow_coefficient(uns: float) -> float:
    # two fitted regimes, Uns == 1 belongs to the lower one
    if uns > 1:
        return PHI_NUMERATOR / uns ** 0.5
    return PHI_NUMERATOR / uns ** 0.25


def compute_geometry(sim: SimilarityParameters) -> GeometrySizing:
    phi = flow_coefficient(sim.uns)
    r2 = (1 / sim.angular_velocity) * math.sqrt(GRAVITY * sim.head_per_stage / phi)
    return GeometrySizing(
        phi=phi,
        outer_radius=r2,
        impeller_diameter=r2 * 2 * 1000,
        tip_speed=sim.angular_velocity * r2,
    )


def baseline_efficiency(flow: float, speed: float, ns: float, num_impellers: float) -> float:
    """
    Efficiency regression in US units, as a fraction.

    Each impeller after the first costs half a point. The result is not
    clamped; callers get the raw regression value.
    """
    q_us = flow * US_FLOW_FACTOR
    n_us = ns * US_NS_FACTOR
    eff = (EFF_BASE
           - EFF_FLOW_COEFF * (q_us / speed) ** EFF_FLOW_EXPONENT
           - EFF_NS_COEFF * math.log10(EFF_NS_REFERENCE / n_us) ** 2)
    return eff - EFF_STAGE_PENALTY * (num_impellers - 1)


def hydraulic_power_kw(flow: float, head: float, sg: float, efficiency: float) -> float:
    """Hydraulic power (kW) for flow in m3/h, head in m and efficiency as a fraction."""
    return (flow * head * sg) / (HYDRAULIC_POWER_DIVISOR * efficiency)


def reynolds_number(flow: float, suctype: float, head_stage: float, viscosity: float) -> float:
    # viscosity in cSt -> m2/s
    return (math.sqrt((flow / suctype) / SECONDS_PER_HOUR)
            * (GRAVITY * head_stage) ** 0.25
            / (viscosity * 1e-6))


def _exp_fit(re: float, coeffs) -> float:
    a, b, c, d = coeffs
    return a - b * math.exp(-c * re ** d)


def viscous_correction(re: float) -> ViscousCorrection:
    """
    Head and efficiency derating for viscous service.

    Reported for information only; the efficiency and power results are not
    multiplied by these factors.
    """
    return ViscousCorrection(
        cq=VISCOUS_FLOW,
        ch=_exp_fit(re, VISCOUS_HEAD),
        ce=_exp_fit(re, VISCOUS_EFFICIENCY),
    )


def alternate_pump_triggered(flow: float, ns: float) -> bool:
    return (20 < flow < 61 and ns < 20) or (ns < 18 and flow <= 20)


def alternate_efficiency(flow: float, ns: float, efficiency: float) -> float:
    """
    Efficiency (%) of a replacement pump for low-Ns, low-flow duties.
    """
    if 20 < flow < 61 and ns < 20:
        eff_pct = efficiency * 100 - ALT_EFFICIENCY_DROP
    elif ns < 18 and flow <= 20:
        eff_pct = evaluate_polynomial(ns, ALT_EFFICIENCY_POLY) * 100
    else:
        eff_pct = efficiency * 100 - ALT_EFFICIENCY_DROP
    return max(0.0, min(100.0, eff_pct))


def estimate_alternate_pump(req: PumpRequest, ns: float, impeller_diameter: float,
                            efficiency: float) -> AlternatePumpEstimate:
    eff_pct = alternate_efficiency(req.q, ns, efficiency)
    # no power figure for a pump with zero efficiency
    power = None
    if eff_pct > 0:
        power = round(hydraulic_power_kw(req.q, req.tdhm, req.sg, eff_pct / 100), 2)
    return AlternatePumpEstimate(
        flow=round(req.q, 2),
        head=round(req.tdhm, 2),
        ns=round(ns, 2),
        impdia=round(impeller_diameter, 2),
        npsh=round(req.npsha, 2),
        speed=round(req.n),
        efficiency=round(eff_pct, 2),
        hydpower=power,
    )


def _coerce(data: Union[PumpRequest, Mapping[str, Any]]) -> PumpRequest:
    if isinstance(data, PumpRequest):
        return data
    try:
        return PumpRequest.model_validate(data)
    except ValidationError as exc:
        raise from_pydantic(exc) from exc


def size_pump(data: Union[PumpRequest, Mapping[str, Any]]) -> PumpSizingResult:
    """
    Centrifugal pump sizing at one duty point.

    Args:
        data: a validated PumpRequest, or the raw request mapping
              (keys n, q, tdhm, npsha, suctype, sg, num_impellers, viscosity)

    Returns:
        PumpSizingResult with similarity parameters, geometry, efficiency,
        warnings, the six-point performance curve and, for small low-Ns
        duties, an alternate pump estimate.

    Raises:
        InputValidationError: a field is missing, non-numeric, non-finite or out of range
        ComputationFault: the correlations could not be evaluated
    """
    req = _coerce(data)
    try:
        return _evaluate(req)
    except (ArithmeticError, ValueError) as exc:
        raise ComputationFault(f"pump correlations failed: {exc}") from exc


def _evaluate(req: PumpRequest) -> PumpSizingResult:
    # 1. Similarity parameters and geometry
    sim = compute_similarity(req)
    geo = compute_geometry(sim)

    # 2. Efficiency and power
    eff = baseline_efficiency(req.q, req.n, sim.ns, req.num_impellers)
    kw = hydraulic_power_kw(req.q, req.tdhm, req.sg, eff)

    # 3. Viscous service
    re = reynolds_number(req.q, req.suctype, sim.head_per_stage, req.viscosity)
    visc = viscous_correction(re)

    # 4. Classification and warnings
    band = classify_ns(sim.ns)
    logger.debug("Ns=%.2f -> %s (%s)", sim.ns, band.value, band.label)

    warnings = evaluate_warnings(DesignCheck(
        ns=sim.ns, tip_speed=geo.tip_speed, npsha=req.npsha, nss=sim.nss,
    ))
    for w in warnings:
        if w["critical"]:
            logger.info("Pump design warning: %s", w["text"])

    # 5. Performance curve
    performance = build_performance_curve(req.q, req.tdhm, eff, req.npsha, band, req.sg)

    # 6. Replacement pump for small low-Ns duties
    alternate: Optional[AlternatePumpEstimate] = None
    if alternate_pump_triggered(req.q, sim.ns):
        alternate = estimate_alternate_pump(req, sim.ns, geo.impeller_diameter, eff)

    return PumpSizingResult(
        efficiency=round(eff * 100, 2),
        uns=round(sim.uns, 4),
        ns=round(sim.ns, 2),
        unss=round(sim.unss, 4),
        nss=round(sim.nss, 2),
        phi=round(geo.phi, 4),
        angvel=round(sim.angular_velocity, 2),
        tipspeed=round(geo.tip_speed, 2),
        impdia=round(geo.impeller_diameter, 2),
        headstage=round(sim.head_per_stage, 1),
        hydpower=round(kw, 2),
        reynolds=round(re, 2),
        cq=round(visc.cq, 2),
        ch=round(visc.ch, 2),
        ce=round(visc.ce, 2),
        nstatus=band.value,
        statusText=band.label,
        warnings=warnings,
        performanceData=performance,
        newPumpPerformance=alternate,
    )
