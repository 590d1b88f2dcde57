from typing import Literal, Optional, List, NamedTuple
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Entry Types ---

Kind = Literal["Normal", "Accident", "Failed"]


class Entry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    time: str = Field(pattern=r"^\d{2}:\d{2}:\d{2}$")
    kind: Kind
    bristol_type: Optional[int] = Field(default=None, ge=1, le=7, alias="bristolType")
    notes: str = ""
    rating: int


class DayCounts(NamedTuple):
    successful: int
    accidents: int
    failed: int

    @property
    def total(self) -> int:
        return self.successful + self.accidents + self.failed

# --- Aggregates ---


class Statistics(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_days: int = 0
    successful_days: int = 0
    accident_days: int = 0
    failed_days: int = 0
    total_successful: int = 0
    total_accidents: int = 0
    total_failed: int = 0
    successful_percentage: int = 0
    accident_percentage: int = 0
    failed_percentage: int = 0
    avg_successful_per_day: float = 0
    avg_accidents_per_day: float = 0
    avg_failed_per_day: float = 0

# --- Calendar markers ---


class Dot(BaseModel):
    key: str
    color: str


class MarkedDate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    dots: List[Dot] = []
    marked: bool = False
    selected: bool = False
    selected_color: Optional[str] = None
