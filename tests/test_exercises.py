def test_create_exercise_returns_201_and_envelope(client, make_exercise):
    payload = make_exercise(1)
    r = client.post("/exercises", json=payload)

    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert isinstance(body["data"], list) and len(body["data"]) == 1
    assert body["data"][0] == payload


def test_created_exercise_is_listed(client, make_exercise):
    payload = make_exercise(7)
    client.post("/exercises", json=payload)

    r = client.get("/exercises")
    assert r.status_code == 200
    names = [e["name"] for e in r.json()["data"]["exercises"]]
    assert payload["name"] in names


def test_duplicate_name_is_conflict(client, make_exercise):
    first = make_exercise(1)
    second = make_exercise(2, name=first["name"])

    assert client.post("/exercises", json=first).status_code == 201
    r = client.post("/exercises", json=second)
    assert r.status_code == 409
    assert r.json()["success"] is False
    assert r.json()["error"]

    # solo uno quedó guardado
    listed = client.get("/exercises").json()["data"]
    assert listed["totalExercises"] == 1


def test_duplicate_exercise_id_is_conflict(client, make_exercise):
    client.post("/exercises", json=make_exercise(1))
    r = client.post("/exercises", json=make_exercise(2, exerciseId="EX0001"))
    assert r.status_code == 409


def test_missing_field_is_400(client, make_exercise):
    payload = make_exercise(1)
    del payload["instructions"]
    r = client.post("/exercises", json=payload)

    assert r.status_code == 400
    assert r.json()["success"] is False
    assert "instructions" in r.json()["error"]


def test_invalid_gif_url_is_400(client, make_exercise):
    r = client.post("/exercises", json=make_exercise(1, gifUrl="not-a-url"))
    assert r.status_code == 400


def test_instructions_order_is_preserved(client, make_exercise):
    steps = ["3. bajar", "1. subir", "2. mantener", "1. subir"]
    client.post("/exercises", json=make_exercise(1, instructions=steps))

    stored = client.get("/exercises").json()["data"]["exercises"][0]
    assert stored["instructions"] == steps


def test_first_page_has_no_links(client, seed_exercises):
    seed_exercises(25)

    r = client.get("/exercises", params={"offset": 0, "limit": 10})
    assert r.status_code == 200
    data = r.json()["data"]
    assert len(data["exercises"]) == 10
    assert data["previousPage"] is None
    assert data["nextPage"] is None
    assert data["currentPage"] == 1
    assert data["totalExercises"] == 25
    assert data["totalPages"] == 3


def test_second_page_links(client, seed_exercises):
    seed_exercises(25)

    r = client.get("/exercises", params={"offset": 10, "limit": 10})
    data = r.json()["data"]

    assert [e["exerciseId"] for e in data["exercises"]] == [f"EX{i:04d}" for i in range(10, 20)]
    assert data["currentPage"] == 2
    assert data["previousPage"] == "http://testserver/exercises?offset=0&limit=10"
    assert data["nextPage"] == "http://testserver/exercises?offset=20&limit=10"


def test_last_page_is_partial(client, seed_exercises):
    seed_exercises(25)

    data = client.get("/exercises", params={"offset": 20, "limit": 10}).json()["data"]
    assert len(data["exercises"]) == 5
    assert data["currentPage"] == 3


def test_default_limit_is_10(client, seed_exercises):
    seed_exercises(12)
    data = client.get("/exercises").json()["data"]
    assert len(data["exercises"]) == 10


def test_limit_bounds_are_validated(client):
    assert client.get("/exercises", params={"limit": 101}).status_code == 400
    assert client.get("/exercises", params={"limit": 0}).status_code == 400
    assert client.get("/exercises", params={"limit": -5}).status_code == 400
    assert client.get("/exercises", params={"offset": -1}).status_code == 400
    assert client.get("/exercises", params={"limit": 100}).status_code == 200


def test_write_guard_requires_token(client, make_exercise, monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "EXERCISES_REQUIRE_AUTH", True)
    r = client.post("/exercises", json=make_exercise(1))
    assert r.status_code == 401
    assert r.json() == {"success": False, "error": "Falta header Authorization Bearer"}

    r = client.post(
        "/exercises",
        json=make_exercise(1),
        headers={"Authorization": "Bearer no-es-un-jwt"},
    )
    assert r.status_code == 401


def test_write_guard_accepts_access_token(client, make_exercise, monkeypatch):
    import pyotp
    from config import settings

    monkeypatch.setattr(settings, "EXERCISES_REQUIRE_AUTH", True)
    secret = client.post("/register", json={"email": "coach@example.com"}).json()["data"]["otpSecret"]
    token = client.post(
        "/authenticate",
        json={"email": "coach@example.com", "code": pyotp.TOTP(secret).now()},
    ).json()["data"]["accessToken"]

    r = client.post(
        "/exercises",
        json=make_exercise(1),
        headers={"Authorization": f"Bearer {token}"},
    )
    assert r.status_code == 201


def test_offset_beyond_sql_range_is_400(client, seed_exercises):
    seed_exercises(3)

    r = client.get("/exercises", params={"offset": 2**63, "limit": 10})
    assert r.status_code == 400
    assert r.json()["success"] is False
    assert "offset" in r.json()["error"]


def test_largest_offset_returns_empty_page(client, seed_exercises):
    from services.exercise_service import MAX_OFFSET

    seed_exercises(3)

    r = client.get("/exercises", params={"offset": MAX_OFFSET, "limit": 100})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["exercises"] == []
    assert data["totalExercises"] == 3
    assert data["nextPage"].endswith(f"offset={MAX_OFFSET + 100}&limit=100")

    assert client.get("/exercises", params={"offset": MAX_OFFSET + 1}).status_code == 400


def test_fractional_offset_and_limit_are_400(client):
    assert client.get("/exercises", params={"offset": 2.5}).status_code == 400
    assert client.get("/exercises", params={"limit": 2.5}).status_code == 400


def test_concurrent_duplicate_names_one_wins(tmp_path, make_exercise):
    import threading

    from sqlalchemy import create_engine, func, select
    from sqlalchemy.orm import sessionmaker

    from config.database import Base
    from models.exercise import Exercise
    from schemas.exercise import ExerciseCreate
    from services.exercise_service import create_exercise
    from utils.errors import ConflictError

    eng = create_engine(
        f"sqlite:///{tmp_path / 'concurrency.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
        future=True,
    )
    Base.metadata.create_all(bind=eng)
    Session = sessionmaker(bind=eng, autoflush=False, expire_on_commit=False, future=True)

    name = make_exercise(1)["name"]
    barrier = threading.Barrier(2)
    outcomes = []
    lock = threading.Lock()

    def worker(n):
        db = Session()
        try:
            barrier.wait()
            create_exercise(db, ExerciseCreate(**make_exercise(n, name=name)))
            result = "created"
        except ConflictError:
            result = "conflict"
        finally:
            db.close()
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=worker, args=(n,)) for n in (1, 2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(outcomes) == ["conflict", "created"]
    with Session() as db:
        assert db.scalar(select(func.count()).select_from(Exercise)) == 1
    eng.dispose()
