"""Animal Schemas - Pydantic models for request bodies, stored documents and responses.

Invariants:
    - AnimalPayload carries the five mutable fields; omitted fields take zero values
    - AnimalCreate rejects an empty animal_name (missing counts as empty)
    - Coordinates are finite (inf/nan cannot be rendered back as JSON)
    - AnimalRecord decodes stored documents: _id rendered as hex, __v decode-only
    - to_document() never emits _id or __v (the store owns both)

Design Decisions:
    - Wire names follow the stored documents (animal_name, _id, __v);
      animalName is accepted as an input alias
    - null in a stored document decodes to the field's zero value
"""

from datetime import datetime
from typing import Any

from bson import ObjectId
from pydantic import (
    AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator,
)


class Location(BaseModel):
    """GeoJSON-shaped location; no geospatial semantics are enforced."""
    model_config = ConfigDict(allow_inf_nan=False)

    type: str = ""
    coordinates: tuple[float, float] = (0.0, 0.0)

    @field_validator("type", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("coordinates", mode="before")
    @classmethod
    def none_to_origin(cls, v: Any) -> Any:
        return (0.0, 0.0) if v is None else v


class AnimalPayload(BaseModel):
    """Full replacement field set for an animal (PUT body, base for the rest)."""
    animal_name: str = Field(
        "", validation_alias=AliasChoices("animal_name", "animalName"),
    )
    species: str = ""
    birthdate: datetime | None = None
    location: Location = Field(default_factory=Location)
    owner: str = ""

    @field_validator("animal_name", "species", "owner", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("location", mode="before")
    @classmethod
    def none_to_zero_location(cls, v: Any) -> Any:
        return Location() if v is None else v

    def to_document(self) -> dict[str, Any]:
        """Mutable fields as stored in MongoDB (also the $set body of an update)."""
        return {
            "animal_name": self.animal_name,
            "species": self.species,
            "birthdate": self.birthdate,
            "location": {
                "type": self.location.type,
                "coordinates": list(self.location.coordinates),
            },
            "owner": self.owner,
        }


class AnimalCreate(AnimalPayload):
    """POST body - animal_name must be non-empty."""

    # model-level so a missing animal_name (default "") is rejected too
    @model_validator(mode="after")
    def require_animal_name(self) -> "AnimalCreate":
        if self.animal_name == "":
            raise ValueError("Animal name cannot be empty")
        return self


class AnimalRecord(AnimalPayload):
    """Animal as stored, including the store-assigned id."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    version: int = Field(0, alias="__v")

    @field_validator("id", mode="before")
    @classmethod
    def object_id_to_hex(cls, v: Any) -> Any:
        return str(v) if isinstance(v, ObjectId) else v

    @field_validator("version", mode="before")
    @classmethod
    def none_to_zero(cls, v: Any) -> Any:
        return 0 if v is None else v

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "AnimalRecord":
        return cls.model_validate(document)


# --- Responses ----------------------------------------------------------------

class MessageResponse(BaseModel):
    message: str


class AnimalCreatedResponse(MessageResponse):
    id: str


class AnimalUpdatedResponse(MessageResponse):
    modified_count: int
