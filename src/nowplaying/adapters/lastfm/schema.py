"""Pydantic models describing the Last.fm API payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Smallest first; Last.fm lists sizes in this order.
IMAGE_SIZE_ORDER: tuple[str, ...] = ("small", "medium", "large", "extralarge", "mega")


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class LastFmBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class ImageModel(LastFmBaseModel):
    size: str = ""
    url: str = Field(default="", alias="#text")


class ArtistPayload(LastFmBaseModel):
    name: str
    mbid: str | None = None
    url: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_compact_schema(cls, value: object) -> object:
        if isinstance(value, Mapping):
            mapping_value = cast(Mapping[str, object], value)
            if "#text" in mapping_value and "name" not in mapping_value:
                data: dict[str, object] = dict(mapping_value)
                text_value = data.get("#text")
                if isinstance(text_value, str):
                    data["name"] = text_value
                return data
            return mapping_value
        return value

    _normalize_mbid = field_validator("mbid", mode="before")(_blank_to_none)


class AlbumPayload(LastFmBaseModel):
    mbid: str | None = None
    title: str = Field(default="", alias="#text")

    _normalize_mbid = field_validator("mbid", mode="before")(_blank_to_none)


class TrackAttr(LastFmBaseModel):
    nowplaying: str = "false"


class DatePayload(LastFmBaseModel):
    uts: int | None = None
    text: str = Field(default="", alias="#text")

    @model_validator(mode="before")
    @classmethod
    def _accept_plain_text(cls, value: object) -> object:
        if isinstance(value, str):
            return {"#text": value}
        return value

    @field_validator("uts", mode="before")
    @classmethod
    def _parse_epoch(cls, value: int | str | None) -> int | None:
        if value is None or value == "":
            return None
        return int(value)


class TrackPayload(LastFmBaseModel):
    artist: ArtistPayload
    name: str
    album: AlbumPayload = Field(default_factory=AlbumPayload)
    image: list[ImageModel] = Field(default_factory=list)
    mbid: str | None = None
    url: str | None = None
    date: DatePayload | None = None
    attr: TrackAttr | None = Field(default=None, alias="@attr")

    _normalize_mbid = field_validator("mbid", mode="before")(_blank_to_none)

    @property
    def is_now_playing(self) -> bool:
        return self.attr is not None and self.attr.nowplaying == "true"


class ErrorResponse(LastFmBaseModel):
    error: int
    message: str = "Last.fm API error"
