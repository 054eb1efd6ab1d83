# sizing/core/curves.py
from typing import Dict, List, Sequence

from sizing.core.classification import NsBand
from sizing.core.constants import (
    FLOW_PERCENTAGES,
    HEAD_COEFFICIENTS,
    EFFICIENCY_COEFFICIENTS,
    NPSH_COEFFICIENTS,
    HYDRAULIC_POWER_DIVISOR,
    MIN_POINT_EFFICIENCY,
    SHUTOFF_POWER_RATIO,
)


def evaluate_polynomial(x: float, coefficients: Sequence[float]) -> float:
    """
    Evaluate sum(c_i * x^i), coefficients in ascending powers.
    """
    result = 0.0
    for power, coeff in enumerate(coefficients):
        result += coeff * x ** power
    return result


def hydraulic_power(flow: float, head: float, sg: float, efficiency_pct: float) -> float:
    """
    Shaft power (kW) at one curve point. A zero efficiency falls back to 1%.
    """
    eff = (efficiency_pct / 100) or MIN_POINT_EFFICIENCY
    return (flow * head * sg) / (HYDRAULIC_POWER_DIVISOR * eff)


def build_performance_curve(flow: float, head_total: float, efficiency: float,
                            npsha: float, band: NsBand, sg: float) -> Dict[str, List[float]]:
    """
    Six-point performance curve at 0/25/50/75/100/130 % of rated flow.

    Head and NPSH tables give percent of the rated value. The efficiency table
    is scaled by the baseline efficiency fraction, which yields percent.
    """
    head_coeffs = HEAD_COEFFICIENTS[band.value]
    eff_coeffs = EFFICIENCY_COEFFICIENTS[band.value]
    npsh_coeffs = NPSH_COEFFICIENTS[band.value]

    percentages = list(FLOW_PERCENTAGES)
    flow_points = [p * flow / 100 for p in percentages]

    head_points = [evaluate_polynomial(p, head_coeffs) * (head_total / 100) for p in percentages]

    efficiency_points = []
    for p in percentages:
        eff = evaluate_polynomial(p, eff_coeffs) * efficiency
        efficiency_points.append(max(0.0, min(100.0, eff)))

    npsh_points = [max(0.0, evaluate_polynomial(p, npsh_coeffs) * (npsha / 100)) for p in percentages]

    power_points = []
    for i, q in enumerate(flow_points):
        if q == 0:
            # shut-off power is a fixed fraction of the 25% point
            p25 = hydraulic_power(flow_points[1], head_points[1], sg, efficiency_points[1])
            power_points.append(SHUTOFF_POWER_RATIO * p25)
        else:
            power_points.append(hydraulic_power(q, head_points[i], sg, efficiency_points[i]))

    return {
        "flowPoints": flow_points,
        "headPoints": head_points,
        "efficiencyPoints": efficiency_points,
        "npshPoints": npsh_points,
        "powerPoints": power_points,
        "flowPercentages": percentages,
    }
