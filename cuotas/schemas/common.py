"""Shared schema types."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Amounts are emitted as JSON numbers rather than pydantic's default strings.
Money = Annotated[
    Decimal,
    PlainSerializer(lambda value: float(value), return_type=float, when_used="json"),
]

__all__ = ["Money"]
