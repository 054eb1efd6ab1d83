# sizing/core/classification.py
from enum import Enum
from typing import Callable, List, NamedTuple

from sizing.core.constants import (
    NS_MIN, NS_MAX, TIP_SPEED_MAX, NPSHA_EXCESS, NSS_MAX, NSS_MIN,
)


class NsBand(Enum):
    """
    Specific-speed band. The value is the key into the curve coefficient tables.
    """
    VERY_LOW = "Ns1"
    LOW = "Ns2"
    MEDIUM_LOW = "Ns3"
    MEDIUM = "Ns4"
    MEDIUM_HIGH = "Ns5"
    HIGH = "Ns6"
    VERY_HIGH = "Ns7"

    @property
    def label(self) -> str:
        return BAND_LABELS[self]


BAND_LABELS = {
    NsBand.VERY_LOW: "Very Low Ns",
    NsBand.LOW: "Low Ns",
    NsBand.MEDIUM_LOW: "Medium-Low Ns",
    NsBand.MEDIUM: "Medium Ns",
    NsBand.MEDIUM_HIGH: "Medium-High Ns",
    NsBand.HIGH: "High Ns",
    NsBand.VERY_HIGH: "Very High Ns",
}

# (exclusive lower bound, band), highest first; anything at or below 20 is VERY_LOW
BAND_RULES = (
    (175.0, NsBand.VERY_HIGH),
    (100.0, NsBand.HIGH),
    (80.0, NsBand.MEDIUM_HIGH),
    (60.0, NsBand.MEDIUM),
    (40.0, NsBand.MEDIUM_LOW),
    (20.0, NsBand.LOW),
)


def classify_ns(ns: float) -> NsBand:
    for threshold, band in BAND_RULES:
        if ns > threshold:
            return band
    return NsBand.VERY_LOW


class DesignCheck(NamedTuple):
    """Values the warning rules look at."""
    ns: float
    tip_speed: float
    npsha: float
    nss: float


class WarningRule(NamedTuple):
    text: str
    critical: bool
    applies: Callable[[DesignCheck], bool]


WARNING_RULES = (
    WarningRule("Ns is too low!", True,
                lambda c: c.ns < NS_MIN),
    WarningRule("Ns is too high - cannot build this pump", True,
                lambda c: c.ns > NS_MAX),
    WarningRule("Tip speed too high for dirty service", True,
                lambda c: c.tip_speed > TIP_SPEED_MAX),
    WarningRule("You have more NPSHA than needed", False,
                lambda c: c.npsha > NPSHA_EXCESS),
    WarningRule("Suction specific speed (Nss) is too high", True,
                lambda c: c.nss > NSS_MAX),
    WarningRule("Suction specific speed (Nss) is very low", False,
                lambda c: c.nss < NSS_MIN),
)


def evaluate_warnings(check: DesignCheck) -> List[dict]:
    """
    Run every warning rule independently; several may fire for one design.
    """
    return [
        {"text": rule.text, "critical": rule.critical}
        for rule in WARNING_RULES
        if rule.applies(check)
    ]
