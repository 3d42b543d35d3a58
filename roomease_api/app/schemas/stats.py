"""Pydantic model for the listing statistics summary."""

from typing import Dict, List

from pydantic import BaseModel, Field


class StatsRead(BaseModel):
    total_properties: int = Field(..., alias="totalProperties")
    cities: int
    cities_list: List[str] = Field(..., alias="citiesList")
    average_price: int = Field(..., alias="averagePrice")
    property_types: Dict[str, int] = Field(..., alias="propertyTypes")

    model_config = {
        "populate_by_name": True,
    }
