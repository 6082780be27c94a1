from typing import Literal

from pydantic import BaseModel


# Upstream payloads. Only ``message`` is used; ``status`` is informational.
class DogApiPicsPayload(BaseModel):
    message: list[str]
    status: str | None = None


class DogApiListPayload(BaseModel):
    message: dict[str, list[str]]
    status: str | None = None


class BreedPicsResult(BaseModel):
    data: list[str]


class BreedListResult(BaseModel):
    data: dict[str, list[str]]


class ErrorBody(BaseModel):
    status: Literal["error"] = "error"
    message: str
