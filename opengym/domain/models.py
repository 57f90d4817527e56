"""Pydantic models shared by the API client, coordinator and views."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field


class LocationEntity(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    latitude: float = Field(alias="lat")
    longitude: float = Field(alias="lng")


class GymEntity(BaseModel):
    """A place as served by the remote API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str = ""
    image_url: str | None = Field(default=None, alias="imageUrl")
    location: LocationEntity
    address: str | None = None

    def to_displayable(self) -> PlaceElementDisplayable:
        return PlaceElementDisplayable(
            id=self.id,
            name=self.name,
            short_description=self.description,
            image_url=self.image_url,
            location=self.location,
        )


class PlaceElementDisplayable(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    short_description: str
    image_url: str | None = None
    location: LocationEntity


class LatLngBounds(BaseModel):
    model_config = ConfigDict(frozen=True)

    southwest: LocationEntity
    northeast: LocationEntity

    @classmethod
    def around(cls, locations: list[LocationEntity]) -> LatLngBounds:
        if not locations:
            raise ValueError("Cannot bound an empty set of locations.")
        latitudes = [item.latitude for item in locations]
        longitudes = [item.longitude for item in locations]
        return cls(
            southwest=LocationEntity(latitude=min(latitudes), longitude=min(longitudes)),
            northeast=LocationEntity(latitude=max(latitudes), longitude=max(longitudes)),
        )


class ShortDetailsState(BaseModel):
    model_config = ConfigDict(frozen=True)

    visible: bool = False
    content: PlaceElementDisplayable | None = None


class PlaceListState(BaseModel):
    """Snapshot published by the place list coordinator.

    Snapshots are frozen; every change produces a new instance through
    ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)

    places: tuple[PlaceElementDisplayable, ...] = ()
    search_query: str = ""
    search_hints: tuple[str, ...] = ()
    loading: bool = True
    error: str | None = None
    short_details: ShortDetailsState = Field(default_factory=ShortDetailsState)
    default_bounds: LatLngBounds | None = Field(default=None, exclude=True, repr=False)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def lat_lng_bounds(self) -> LatLngBounds | None:
        if self.places:
            return LatLngBounds.around([place.location for place in self.places])
        return self.default_bounds


__all__ = [
    "GymEntity",
    "LatLngBounds",
    "LocationEntity",
    "PlaceElementDisplayable",
    "PlaceListState",
    "ShortDetailsState",
]
