############################################################# Base Models #############################################################

from pydantic import BaseModel, ConfigDict, Field, field_validator
from Utils.util import clean_text, clean_number
from typing import Any, Dict, Optional, Union


class DamageReport(BaseModel):
    model_config = ConfigDict(extra="ignore")

    base_id: str = Field(alias="baseId")
    table: str
    vehicle: str = "UNKNOWN"
    note: str = ""
    photo_url: Optional[str] = Field(None, alias="photoUrl")
    view: Optional[str] = None
    x_pct: Optional[Union[int, float]] = Field(None, alias="xPct")
    y_pct: Optional[Union[int, float]] = Field(None, alias="yPct")

    @field_validator("base_id", "table", mode="before")
    @classmethod
    def required_text(cls, v):
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Missing baseId or table")
        return v.strip()

    @field_validator("vehicle", mode="before")
    @classmethod
    def vehicle_or_unknown(cls, v):
        return clean_text(v) or "UNKNOWN"

    @field_validator("note", mode="before")
    @classmethod
    def note_or_empty(cls, v):
        return clean_text(v) or ""

    @field_validator("photo_url", "view", mode="before")
    @classmethod
    def optional_text(cls, v):
        return clean_text(v)

    @field_validator("x_pct", "y_pct", mode="before")
    @classmethod
    def numeric_only(cls, v):
        return clean_number(v)

    def to_airtable_fields(self) -> Dict[str, Any]:
        fields: Dict[str, Any] = {
            "Vehicle": self.vehicle,
            "Status": "Open",
            "Note": self.note,
        }
        if self.photo_url:
            fields["Photo"] = [{"url": self.photo_url}]  # attachment fetched by Airtable
        if self.view:
            fields["View"] = self.view
        if self.x_pct is not None:
            fields["XPct"] = self.x_pct
        if self.y_pct is not None:
            fields["YPct"] = self.y_pct
        return fields
