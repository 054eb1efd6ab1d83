# sizing/core/constants.py
from types import MappingProxyType

# === Unit conversions ===
GRAVITY = 9.81                  # m/s2
SECONDS_PER_HOUR = 3600.0
US_FLOW_FACTOR = 4.402867       # m3/h -> US gpm
US_NS_FACTOR = 51.66            # metric Ns -> US Ns
UNITLESS_NS_DIVISOR = 52.919    # metric Ns -> dimensionless Ns
HYDRAULIC_POWER_DIVISOR = 367.63  # m3/h * m -> kW

# === Efficiency regression ===
EFF_BASE = 0.94
EFF_FLOW_COEFF = 0.08955
EFF_FLOW_EXPONENT = -0.2133
EFF_NS_COEFF = 0.29
EFF_NS_REFERENCE = 2286.0
EFF_STAGE_PENALTY = 0.005       # per additional impeller

# === Flow coefficient fit ===
PHI_NUMERATOR = 0.4

# === Viscous correction: C = a - b * exp(-c * Re^d) ===
VISCOUS_HEAD = (1.004, 1.391, 0.394, 0.233)
VISCOUS_EFFICIENCY = (1.016, 2.848, 0.369, 0.204)
VISCOUS_FLOW = 1.0  # flow factor is not derated

# === Limits for warnings ===
NS_MIN = 20.0
NS_MAX = 250.0
TIP_SPEED_MAX = 55.0            # m/s, dirty service
NPSHA_EXCESS = 10.0             # m
NSS_MAX = 213.0
NSS_MIN = 50.0

# === Alternate ("new") pump estimate ===
ALT_EFFICIENCY_DROP = 9.89      # percentage points
# Efficiency vs Ns for small low-Ns pumps, ascending powers Ns^0 .. Ns^7
ALT_EFFICIENCY_POLY = (
    -8.84553e-3,
    7.9485e-2,
    -4.0913e-3,
    1.08499e-4,
    -1.40755e-6,
    5.4971e-9,
    4.07879e-11,
    -2.66217e-13,
)

# === Performance curve ===
FLOW_PERCENTAGES = (0, 25, 50, 75, 100, 130)
MIN_POINT_EFFICIENCY = 0.01     # fraction used when a curve point has zero efficiency
SHUTOFF_POWER_RATIO = 0.9       # shut-off power relative to the 25% point

# Coefficients (a, b, c, d, e, f) of a + b*x + c*x^2 + d*x^3 + e*x^4 + f*x^5,
# x = percent of rated flow. Each curve is expressed in percent of the rated value.
HEAD_COEFFICIENTS = MappingProxyType({
    "Ns1": (120.8, -0.21384782, 0.010905096, -0.00021595602, 1.3648307e-06, -2.8993229e-09),
    "Ns2": (142.0, -0.223337, -0.0055263614, 0.00018385812, -2.3572357e-06, 8.7462759e-09),
    "Ns3": (160.0, -0.40244256, -0.0057075647, 0.00014007848, -1.5704207e-06, 5.4283494e-09),
    "Ns4": (175.0, -0.56557259, -0.0068800616, 0.00019610839, -2.3296197e-06, 8.7211455e-09),
    "Ns5": (185.0, -1.4234848, 0.015568182, 0.00015742424, -4.6181818e-06, 2.0606061e-08),
    "Ns6": (225.0, -1.2501499, -0.068654179, 0.0024996503, -2.7729337e-05, 9.5984016e-08),
    "Ns7": (380.0, -4.3295704, -0.11964691, 0.0044487801, -4.5967011e-05, 1.4973471e-07),
})

EFFICIENCY_COEFFICIENTS = MappingProxyType({
    "Ns1": (0.0, 2.4445788, -0.014159341, -0.00012353846, 1.869011e-06, -6.6227106e-09),
    "Ns2": (0.0, 2.2298868, -0.010668343, -9.6486402e-05, 1.1941303e-06, -3.9231879e-09),
    "Ns3": (0.0, 2.5249317, -0.032144311, 0.00039017405, -3.1181796e-06, 9.0593851e-09),
    "Ns4": (0.0, 2.2583217, -0.023349029, 0.00024363947, -1.8396892e-06, 4.7987568e-09),
    "Ns5": (0.0, 2.4710846, -0.032865937, 0.00046168625, -4.0147e-06, 1.2133467e-08),
    "Ns6": (0.0, 1.7089419, -0.0089007132, 6.4419969e-05, -4.1622822e-07, -4.6842047e-10),
    "Ns7": (0.0, 1.4879138, -0.0017261461, -0.00010420124, 1.4956333e-06, -7.6891997e-09),
})

NPSH_COEFFICIENTS = MappingProxyType({
    "Ns1": (48.0, 0.23681818, -0.014001515, 0.00039790909, -3.9684848e-06, 1.6727273e-08),
    "Ns2": (72.0, 0.061821512, -0.015774015, 0.00034247242, -2.9996848e-06, 1.3705406e-08),
    "Ns3": (98.0, -0.32168731, -0.034086057, 0.00083099627, -7.1443383e-06, 2.5846687e-08),
    "Ns4": (120.0, -0.83951382, -0.011862737, 0.00035402331, -3.2840759e-06, 1.5696304e-08),
    "Ns5": (186.0, -0.72372627, -0.050911699, 0.0011401943, -1.1171744e-05, 4.7246975e-08),
    "Ns6": (403.0, -3.4442574, -0.063122994, 0.0019938438, -2.4935358e-05, 1.1723477e-07),
    "Ns7": (1000.0, -6.9291126, -0.19079618, 0.0035209596, -3.6734776e-05, 1.8533911e-07),
})
