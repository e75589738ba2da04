from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, ConfigDict


class DescriptionBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    product_code: int
    valid_time: datetime
    symbology_offset: int = 0
    graphic_offset: int = 0
    tabular_offset: int = 0

    @property
    def has_tabular(self) -> bool:
        return self.tabular_offset > 0
