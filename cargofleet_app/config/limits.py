"""
Loading limits for container variants.

Fractions are applied to a container's declared max load. Override here if
the fleet's operating rules change.
"""

from __future__ import annotations

# Hazardous liquid: fill no further than half of max load
HAZARDOUS_LIQUID_FILL_FRACTION = 0.5

# Ordinary liquid: leave 10% ullage
LIQUID_FILL_FRACTION = 0.9

# Gas containers keep this fraction of their load as residue after unloading
GAS_RESIDUE_FRACTION = 0.05

# Serial number layout: KON-<type code>-<n>
SERIAL_PREFIX = "KON"

HAZARD_ATTEMPT_MESSAGE = "Hazardous operation attempt!"

# Floating-point tolerance (absolute floor and relative)
EPS = 1e-9
REL_TOL = 1e-9
