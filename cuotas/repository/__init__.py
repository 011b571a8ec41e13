"""Repository helpers for the dues service."""

from .pago_repository import (
    create_pago,
    delete_pago,
    find_pago_del_periodo,
    get_pago,
    insert_pagos_ignorando_duplicados,
    list_pagos_por_socio,
    meses_registrados,
    save_pago,
)
from .reporte_repository import (
    fetch_meses_pagados_por_socio,
    fetch_socios,
    fetch_total_recaudado,
    fetch_totales_mensuales,
    fetch_totales_por_socio,
    fetch_totales_socio_mes,
)
from .socio_repository import (
    create_socio,
    delete_socio,
    get_socio,
    list_socios,
)

__all__ = [
    "create_pago",
    "create_socio",
    "delete_pago",
    "delete_socio",
    "fetch_meses_pagados_por_socio",
    "fetch_socios",
    "fetch_total_recaudado",
    "fetch_totales_mensuales",
    "fetch_totales_por_socio",
    "fetch_totales_socio_mes",
    "find_pago_del_periodo",
    "get_pago",
    "get_socio",
    "insert_pagos_ignorando_duplicados",
    "list_pagos_por_socio",
    "list_socios",
    "meses_registrados",
    "save_pago",
]
