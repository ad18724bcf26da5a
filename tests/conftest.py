import os

# Antes de importar la app: BD en memoria y config predecible
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("EXERCISES_REQUIRE_AUTH", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config.database import Base, get_db
from main import create_app
import models  # noqa: F401


@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture()
def db_session(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def app(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    application = create_app()
    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest.fixture()
def client(app):
    return TestClient(app)


def _exercise(n: int = 0, **overrides) -> dict:
    payload = {
        "exerciseId": f"EX{n:04d}",
        "name": f"Band Jack Knife Sit-up {n}",
        "gifUrl": f"https://ucarecdn.com/05fcc879/EX{n:04d}.gif",
        "targetMuscles": ["abs"],
        "bodyParts": ["waist", "back"],
        "equipments": ["band"],
        "secondaryMuscles": ["abs", "lats"],
        "instructions": [
            "Step 1: Start with...",
            "Step 2: Move into...",
            "Step 3: Move into...",
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def make_exercise():
    return _exercise


@pytest.fixture()
def seed_exercises(client):
    def _seed(n: int):
        for i in range(n):
            r = client.post("/exercises", json=_exercise(i))
            assert r.status_code == 201, r.text
    return _seed


@pytest.fixture()
def stale_code():
    """Código TOTP de hace unos minutos que no coincide con ninguno de la ventana actual"""
    import time

    import pyotp

    def _stale(secret: str) -> str:
        totp = pyotp.TOTP(secret)
        now = time.time()
        accepted = {totp.at(now + d * 30) for d in (-2, -1, 0, 1, 2)}
        for k in range(10, 60):
            code = totp.at(now - k * 30)
            if code not in accepted:
                return code
        pytest.skip("sin código fuera de la ventana")
    return _stale
