"""Pydantic schemas for member resources."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SocioCreate(BaseModel):
    nombre: str


class SocioResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str


__all__ = ["SocioCreate", "SocioResponse"]
