def test_list_socios_empty(client):
    response = client.get("/socios")

    assert response.status_code == 200
    assert response.json() == []


def test_create_socio_then_list_orders_by_id(client, crear_socio):
    primero = crear_socio("Ana")
    segundo = crear_socio("Bruno")

    assert primero["nombre"] == "Ana"
    assert segundo["id"] > primero["id"]

    response = client.get("/socios")
    assert [socio["nombre"] for socio in response.json()] == ["Ana", "Bruno"]
    assert [socio["id"] for socio in response.json()] == [primero["id"], segundo["id"]]


def test_create_socio_without_nombre_is_rejected(client):
    response = client.post("/socios", json={})

    assert response.status_code == 400
    assert "nombre" in response.json()["error"]


def test_create_socio_accepts_empty_nombre(client):
    response = client.post("/socios", json={"nombre": ""})

    assert response.status_code == 201
    assert response.json()["nombre"] == ""


def test_delete_socio_cascades_payments(client, crear_socio, pagar):
    socio = crear_socio()
    pagar(socio["id"], 1)
    pagar(socio["id"], 2)

    response = client.delete(f"/socios/{socio['id']}")
    assert response.status_code == 200
    assert response.json() == {"mensaje": "Socio eliminado"}

    assert client.get(f"/pagos/{socio['id']}").json() == []
    assert client.get("/reportes/total").json() == {"total": 0}


def test_delete_socio_twice_is_not_found(client, crear_socio):
    socio = crear_socio()
    client.delete(f"/socios/{socio['id']}")

    response = client.delete(f"/socios/{socio['id']}")

    assert response.status_code == 404
    assert response.json() == {"error": "Socio no encontrado"}


def test_invalid_socio_id_is_a_validation_error(client):
    response = client.delete("/socios/abc")

    assert response.status_code == 400
    assert "error" in response.json()
