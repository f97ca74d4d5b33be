"""Health probes: liveness never needs the DB, readiness needs a readable rooms table."""

from booking_api.db.base import Base
import booking_api.infrastructure.database as db_module


async def test_liveness_answers_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "alive"


async def test_readiness_reports_room_count(client, factory):
    hotel = await factory.hotel()
    await factory.room(hotel)
    await factory.room(hotel, capacity=0)

    res = await client.get("/health/ready")

    assert res.status_code == 200
    assert res.json() == {"status": "ready", "rooms": 2}


async def test_readiness_is_503_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_not_initialized"


async def test_readiness_is_503_when_rooms_table_is_missing(client, test_engine):
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    res = await client.get("/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
