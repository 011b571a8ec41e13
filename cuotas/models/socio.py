"""SQLAlchemy model for club members."""

from __future__ import annotations

from typing import List

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cuotas.core.database import Base


class Socio(Base):
    """A registered member of the club."""

    __tablename__ = "socios"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(Text, nullable=False)

    pagos: Mapped[List["Pago"]] = relationship(
        "Pago",
        back_populates="socio",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return "Socio(id={id}, nombre={nombre!r})".format(id=self.id, nombre=self.nombre)


__all__ = ["Socio"]
