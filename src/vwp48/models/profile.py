from __future__ import annotations
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import CartesianComponent, PolarVector, polar_to_components


class WindObservation(BaseModel):
    model_config = ConfigDict(frozen=True)

    direction: float
    speed: float
    altitude: float  # km above ground, derived from slant range and elevation

    def components(self) -> CartesianComponent:
        return polar_to_components(self.direction, self.speed)


class WindProfile(BaseModel):
    """Altitude-ordered wind observations from one volume scan.

    The derived quantities are computed from the observations on every call;
    nothing is cached on the profile.
    """
    model_config = ConfigDict(frozen=True)

    observations: Tuple[WindObservation, ...] = Field(default_factory=tuple)

    @field_validator("observations")
    @classmethod
    def _sort_by_altitude(cls, v):
        return tuple(sorted(v, key=lambda o: o.altitude))

    def __len__(self) -> int:
        return len(self.observations)

    @property
    def altitudes(self) -> list[float]:
        return [o.altitude for o in self.observations]

    @property
    def u(self) -> list[float]:
        return [o.components().u for o in self.observations]

    @property
    def v(self) -> list[float]:
        return [o.components().v for o in self.observations]

    # Convenience wrappers; the math lives in vwp48.kinematics
    def interp_height(self, height: float) -> Optional[CartesianComponent]:
        from ..kinematics import interp_component
        return interp_component(self, height)

    def mean_wind(self, top: float) -> Optional[PolarVector]:
        from ..kinematics import mean_wind
        return mean_wind(self, top)

    def wind_shear(self, bot: float, top: float) -> Optional[PolarVector]:
        from ..kinematics import wind_shear
        return wind_shear(self, bot, top)

    def bunkers(self) -> Optional[Tuple[PolarVector, PolarVector]]:
        from ..kinematics import bunkers
        return bunkers(self)
