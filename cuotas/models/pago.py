"""SQLAlchemy model for monthly dues payments."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    Date,
    ForeignKey,
    Integer,
    Numeric,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cuotas.core.database import Base

UNIQUE_PERIOD_CONSTRAINT = "uq_pagos_socio_mes_anio"


class Pago(Base):
    """One dues payment covering a single month of a year for a member."""

    __tablename__ = "pagos"
    __table_args__ = (
        UniqueConstraint("socio_id", "mes", "anio", name=UNIQUE_PERIOD_CONSTRAINT),
        CheckConstraint("mes >= 1 AND mes <= 12", name="ck_pagos_mes"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    socio_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("socios.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    monto: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    fecha: Mapped[date] = mapped_column(
        Date, nullable=False, default=date.today, server_default=func.current_date()
    )
    mes: Mapped[int] = mapped_column(Integer, nullable=False)
    anio: Mapped[int] = mapped_column(Integer, nullable=False)

    socio = relationship("Socio", back_populates="pagos")

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            "Pago(id={id}, socio_id={socio_id}, mes={mes}, anio={anio}, monto={monto})"
        ).format(
            id=self.id,
            socio_id=self.socio_id,
            mes=self.mes,
            anio=self.anio,
            monto=self.monto,
        )


__all__ = ["Pago", "UNIQUE_PERIOD_CONSTRAINT"]
