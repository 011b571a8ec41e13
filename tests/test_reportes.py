from cuotas.services.reporte_service import MESES


def test_total_without_payments_is_zero(client):
    response = client.get("/reportes/total")

    assert response.status_code == 200
    assert response.json() == {"total": 0}


def test_total_sums_every_payment(client, crear_socio, pagar):
    ana = crear_socio("Ana")
    bruno = crear_socio("Bruno")
    pagar(ana["id"], 1, monto=1000)
    pagar(ana["id"], 2, anio=2023, monto=250.5)
    pagar(bruno["id"], 1, monto=500)

    assert client.get("/reportes/total").json() == {"total": 1750.5}


def test_member_totals_include_members_without_payments(client, crear_socio, pagar):
    ana = crear_socio("Ana")
    bruno = crear_socio("Bruno")
    pagar(ana["id"], 1, monto=1000)
    pagar(ana["id"], 2, monto=1000)

    response = client.get("/reportes/socios")

    assert response.json() == [
        {"id": ana["id"], "nombre": "Ana", "total_pagado": 2000},
        {"id": bruno["id"], "nombre": "Bruno", "total_pagado": 0},
    ]


def test_pending_months_flags_paid_months(client, crear_socio, pagar):
    socio = crear_socio()
    pagar(socio["id"], 2)
    pagar(socio["id"], 12)
    pagar(socio["id"], 3, anio=2023)

    response = client.get(f"/cuotas-pendientes/{socio['id']}/2024")

    body = response.json()
    assert [fila["mes"] for fila in body] == MESES
    assert [fila["numeroMes"] for fila in body] == list(range(1, 13))
    assert [fila["numeroMes"] for fila in body if fila["pagado"]] == [2, 12]


def test_monthly_report_without_payments_has_twelve_zero_entries(client):
    response = client.get("/reporte-mensual/2024")

    body = response.json()
    assert [fila["mes"] for fila in body] == [
        "Enero",
        "Febrero",
        "Marzo",
        "Abril",
        "Mayo",
        "Junio",
        "Julio",
        "Agosto",
        "Septiembre",
        "Octubre",
        "Noviembre",
        "Diciembre",
    ]
    assert all(fila["total"] == 0 for fila in body)


def test_monthly_report_fills_gaps(client, crear_socio, pagar):
    ana = crear_socio("Ana")
    bruno = crear_socio("Bruno")
    pagar(ana["id"], 3, monto=1000)
    pagar(bruno["id"], 3, monto=500)
    pagar(bruno["id"], 10, monto=700)
    pagar(bruno["id"], 10, anio=2023, monto=9999)

    body = client.get("/reporte-mensual/2024").json()

    totales = {fila["mes"]: fila["total"] for fila in body}
    assert len(body) == 12
    assert totales["Marzo"] == 1500
    assert totales["Octubre"] == 700
    assert totales["Enero"] == 0


def test_annual_status(client, crear_socio):
    al_dia = crear_socio("Ana")
    sin_pagos = crear_socio("Bruno")
    client.post(
        "/pagos",
        json={
            "socio_id": al_dia["id"],
            "monto": 1000,
            "meses": list(range(1, 13)),
            "anio": 2024,
        },
    )

    response = client.get("/reporte-anual/2024")

    assert response.json() == [
        {
            "id": al_dia["id"],
            "nombre": "Ana",
            "pagados": 12,
            "pendientes": 0,
            "estado": "Al día",
        },
        {
            "id": sin_pagos["id"],
            "nombre": "Bruno",
            "pagados": 0,
            "pendientes": 12,
            "estado": "Pendiente",
        },
    ]


def test_annual_status_counts_only_the_requested_year(client, crear_socio, pagar):
    socio = crear_socio()
    pagar(socio["id"], 1, anio=2024)
    pagar(socio["id"], 2, anio=2023)

    fila = client.get("/reporte-anual/2024").json()[0]

    assert fila["pagados"] == 1
    assert fila["pendientes"] == 11
    assert fila["estado"] == "Pendiente"


def test_payments_matrix(client, crear_socio, pagar):
    ana = crear_socio("Ana")
    bruno = crear_socio("Bruno")
    pagar(ana["id"], 1, monto=1000)
    pagar(ana["id"], 2, monto=1000)
    pagar(bruno["id"], 2, monto=500)
    pagar(bruno["id"], 5, anio=2023, monto=800)

    body = client.get("/reporte-pagos/2024").json()

    assert [fila["nombre"] for fila in body] == ["Ana", "Bruno", "Total general"]
    fila_ana, fila_bruno, total = body
    assert fila_ana["id"] == ana["id"]
    assert list(fila_ana["meses"]) == MESES
    assert fila_ana["meses"]["Enero"] == 1000
    assert fila_ana["meses"]["Febrero"] == 1000
    assert fila_ana["total"] == 2000
    assert fila_bruno["meses"]["Mayo"] == 0
    assert fila_bruno["total"] == 500
    assert total["id"] is None
    assert total["meses"]["Febrero"] == 1500
    assert total["total"] == 2500


def test_payments_matrix_without_members_only_has_grand_total(client):
    body = client.get("/reporte-pagos/2024").json()

    assert len(body) == 1
    assert body[0]["nombre"] == "Total general"
    assert body[0]["total"] == 0
