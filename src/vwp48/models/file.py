from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from .common import Station
from .profile import WindProfile


class VwpFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    station: Station
    valid_time: datetime
    profile: WindProfile = Field(default_factory=WindProfile)

    @property
    def location(self) -> tuple[float, float]:
        return self.station.lat_deg, self.station.lon_deg

    @classmethod
    def from_binary(cls, data) -> "VwpFile":
        from ..binary.reader import parse_file
        return parse_file(data)
