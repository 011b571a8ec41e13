import os
import tempfile

import pytest

_DB_DIR = tempfile.mkdtemp(prefix="cuotas-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_DB_DIR, "cuotas.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from cuotas.core.database import Base, SessionLocal, engine  # noqa: E402
from cuotas.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def crear_socio(client):
    def _crear(nombre="Ana"):
        response = client.post("/socios", json={"nombre": nombre})
        assert response.status_code == 201
        return response.json()

    return _crear


@pytest.fixture
def pagar(client):
    def _pagar(socio_id, mes, anio=2024, monto=1500):
        response = client.post(
            "/pagos",
            json={"socio_id": socio_id, "monto": monto, "mes": mes, "anio": anio},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _pagar
