"""
Kinematic quantities derived from a VAD wind profile.

Every function returns None when its inputs cannot support the computation
(an empty profile, a layer reaching above the highest observation, a zero
shear vector). Short profiles are routine in VWP products, so absence is a
normal result rather than an error.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

from vwp48.binary.scale import ms_to_kts
from vwp48.models.common import CartesianComponent, PolarVector
from vwp48.models.profile import WindProfile

# Bunkers et al. (2000) deviation from the mean wind, m/s
BUNKERS_DEVIATION_MS = 7.5
BUNKERS_LAYER_TOP_KM = 6.0


def interp(x: float, xp: Sequence[float], yp: Sequence[float]) -> Optional[float]:
    """
    Piecewise-linear interpolation of ``yp`` at ``x`` over ascending ``xp``.

    Heights below ``xp[0]`` are clamped to ``xp[0]``; heights at or above
    ``xp[-1]`` return None, there is no extrapolation. The bracket is the
    first index ``i`` (scanning forward) with ``x >= xp[i]``, which for
    ascending breakpoints is always the first segment.
    """
    if len(xp) != len(yp):
        raise ValueError(f"x and y lengths differ: {len(xp)} != {len(yp)}")
    if not xp:
        return None

    if x < xp[0]:
        x = xp[0]
    if x >= xp[-1]:
        return None

    i = next((i for i, b in enumerate(xp) if x >= b), None)
    if i is None:
        return None
    dx = xp[i + 1] - xp[i]
    if dx == 0:
        return None
    return yp[i] + (x - xp[i]) * (yp[i + 1] - yp[i]) / dx


def interp_component(profile: WindProfile, height: float) -> Optional[CartesianComponent]:
    xs = profile.altitudes
    u = interp(height, xs, profile.u)
    v = interp(height, xs, profile.v)
    if u is None or v is None:
        return None
    return CartesianComponent(u=u, v=v)


def mean_wind(profile: WindProfile, top: float) -> Optional[PolarVector]:
    """
    Mean wind from the lowest observation up to ``top`` (km).

    The profile is sampled at each whole kilometre from the ceiling of the
    lowest altitude up to, but excluding, ``top``.
    """
    if not profile.observations or not math.isfinite(top) or top >= profile.altitudes[-1]:
        return None

    start = math.ceil(profile.altitudes[0])
    heights = [float(k) for k in range(start, math.ceil(top))]
    if not heights:
        return None

    comps = [interp_component(profile, h) for h in heights]
    if any(c is None for c in comps):
        return None

    n = len(comps)
    return CartesianComponent(
        u=sum(c.u for c in comps) / n,
        v=sum(c.v for c in comps) / n,
    ).to_polar()


def wind_shear(profile: WindProfile, bot: float, top: float) -> Optional[PolarVector]:
    """Vector difference between the winds at ``top`` and ``bot`` (not a rate)."""
    if not profile.observations:
        return None
    upper = interp_component(profile, top)
    lower = interp_component(profile, bot)
    if upper is None or lower is None:
        return None
    return (upper - lower).to_polar()


def bunkers(profile: WindProfile) -> Optional[Tuple[PolarVector, PolarVector]]:
    """
    Bunkers right- and left-mover storm motion.

    Returns ``(right, left)``: the 0-6 km mean wind displaced by 7.5 m/s
    (in knots) perpendicular to the 0-6 km shear vector.
    """
    if not profile.observations:
        return None

    mean = mean_wind(profile, BUNKERS_LAYER_TOP_KM)
    shear = wind_shear(profile, 0.0, BUNKERS_LAYER_TOP_KM)
    if mean is None or shear is None:
        return None

    base = mean.to_components()
    shr = shear.to_components()
    mag = math.hypot(shr.u, shr.v)
    if mag == 0:
        return None

    scale = ms_to_kts(BUNKERS_DEVIATION_MS) / mag
    deviation = CartesianComponent(u=scale * shr.v, v=-scale * shr.u)

    right = base + deviation
    left = base - deviation
    return right.to_polar(), left.to_polar()
