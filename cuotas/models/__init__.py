"""Database models for the dues service."""

from cuotas.models.pago import Pago
from cuotas.models.socio import Socio

__all__ = ["Pago", "Socio"]
