from __future__ import annotations
import math
from .models.file import VwpFile

RING_STEP_KTS = 20
MIN_RING_KTS = 40

# (upper altitude bound km, colour)
ALTITUDE_BANDS = (
    (1.0, (220, 0, 220)),
    (3.0, (255, 0, 0)),
    (6.0, (0, 255, 0)),
    (9.0, (255, 255, 0)),
    (math.inf, (0, 255, 255)),
)


def altitude_color(altitude_km: float) -> tuple[float, float, float]:
    for top, rgb in ALTITUDE_BANDS:
        if altitude_km < top:
            return tuple(c / 255.0 for c in rgb)
    return tuple(c / 255.0 for c in ALTITUDE_BANDS[-1][1])


def hodograph_title(file: VwpFile) -> str:
    return f"VWP valid {file.valid_time:%m/%d/%Y %H%M} UTC"


def plot_hodograph(file: VwpFile, ax=None):
    """Hodograph of the profile, coloured by altitude band, with speed rings."""
    import matplotlib.pyplot as plt

    if ax is None:
        _, ax = plt.subplots()

    obs = file.profile.observations
    max_spd = max([abs(o.speed) for o in obs] + [MIN_RING_KTS])

    for r in range(RING_STEP_KTS, int(max_spd) + 1, RING_STEP_KTS):
        ax.add_patch(plt.Circle((0, 0), r, fill=False, color="0.4", lw=0.8))
    ax.axhline(0, color="0.4", lw=0.5)
    ax.axvline(0, color="0.4", lw=0.5)

    comps = [o.components() for o in obs]
    for a, b, o in zip(comps, comps[1:], obs):
        ax.plot([a.u, b.u], [a.v, b.v], color=altitude_color(o.altitude), lw=3)

    ax.set_xlim(-max_spd, max_spd)
    ax.set_ylim(-max_spd, max_spd)
    ax.set_aspect("equal")
    ax.set_xlabel("u (kt)")
    ax.set_ylabel("v (kt)")
    ax.set_title(hodograph_title(file))
    return ax
