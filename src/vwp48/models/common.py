from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict, Field


def polar_to_components(direction: float, speed: float) -> "CartesianComponent":
    rad = math.radians(direction)
    return CartesianComponent(u=-speed * math.sin(rad), v=-speed * math.cos(rad))


class CartesianComponent(BaseModel):
    """Wind as (u, v): positive u eastward, positive v northward, pointing
    where the air is moving toward."""
    model_config = ConfigDict(frozen=True)

    u: float
    v: float

    def to_polar(self) -> "PolarVector":
        direction = (90.0 - math.degrees(math.atan2(-self.v, -self.u))) % 360.0
        return PolarVector(direction=direction, speed=math.hypot(self.u, self.v))

    def __add__(self, other: "CartesianComponent") -> "CartesianComponent":
        return CartesianComponent(u=self.u + other.u, v=self.v + other.v)

    def __sub__(self, other: "CartesianComponent") -> "CartesianComponent":
        return CartesianComponent(u=self.u - other.u, v=self.v - other.v)

    def __str__(self) -> str:
        return f"{self.u:.0f}, {self.v:.0f}"


class PolarVector(BaseModel):
    """Meteorological wind: direction the wind blows *from* (0 = north,
    clockwise) and speed."""
    model_config = ConfigDict(frozen=True)

    direction: float
    speed: float = Field(..., ge=0)

    def to_components(self) -> CartesianComponent:
        return polar_to_components(self.direction, self.speed)

    def __add__(self, other: "PolarVector") -> "PolarVector":
        return (self.to_components() + other.to_components()).to_polar()

    def __sub__(self, other: "PolarVector") -> "PolarVector":
        return (self.to_components() - other.to_components()).to_polar()

    def __str__(self) -> str:
        return f"{self.direction % 360.0:.0f}/{self.speed:.0f}"


class Station(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat_deg: float
    lon_deg: float
