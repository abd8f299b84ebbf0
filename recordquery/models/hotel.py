from datetime import date
from typing import List
from pydantic import BaseModel, Field, ConfigDict, model_validator

# ----------------------------
# hotels
# ----------------------------
class Availability(BaseModel):
    """Inclusive window in which a hotel takes bookings."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    checkIn: date
    checkOut: date

    @model_validator(mode="after")
    def _check_order(self) -> "Availability":
        if self.checkIn > self.checkOut:
            raise ValueError(f"availability checkIn {self.checkIn} is after checkOut {self.checkOut}")
        return self

class Hotel(BaseModel):
    """Hotel record searched by the filter/sort pipeline."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    id: int
    name: str
    city: str
    price: float
    rating: float
    amenities: List[str] = Field(default_factory=list)
    availability: Availability
