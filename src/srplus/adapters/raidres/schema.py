"""Pydantic models describing the raidres.top API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RaidresBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CharacterPayload(RaidresBaseModel):
    name: str


class SrPlusPayload(RaidresBaseModel):
    value: int = 0

    @field_validator("value", mode="before")
    @classmethod
    def _parse_value(cls, value: int | str | None) -> int:
        if value is None or value == "":
            return 0
        return int(value)


class ReservationPayload(RaidresBaseModel):
    raid_item_id: int = Field(alias="raidItemId")
    character: CharacterPayload
    sr_plus: SrPlusPayload | None = Field(default=None, alias="srPlus")

    @property
    def counter_value(self) -> int:
        return self.sr_plus.value if self.sr_plus is not None else 0


class EventResponse(RaidresBaseModel):
    reference: str
    raid_id: int = Field(alias="raidId")
    reservations: list[ReservationPayload] = Field(default_factory=list)


class RaidItemPayload(RaidresBaseModel):
    id: int
    name: str


class RaidItemsResponse(RaidresBaseModel):
    raid_items: list[RaidItemPayload] = Field(alias="raidItems")

    def name_map(self) -> dict[int, str]:
        return {item.id: item.name for item in self.raid_items}
