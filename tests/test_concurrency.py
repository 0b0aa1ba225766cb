import time

import anyio
import httpx
import pytest


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.mark.anyio
async def test_slow_password_hash_does_not_stall_other_requests(app, settings):
    settings.bcrypt_rounds = 14
    app.state.db.init_db()
    timings = {}

    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:

        async def register_slowly():
            start = time.perf_counter()
            response = await client.post(
                "/register", json={"username": "alice", "email": "a@x.com", "password": "pw123"}
            )
            timings["register"] = time.perf_counter() - start
            assert response.status_code == 201

        async def check_health():
            await anyio.sleep(0.05)
            start = time.perf_counter()
            response = await client.get("/test")
            timings["health"] = time.perf_counter() - start
            assert response.text == "Hello World!"

        async with anyio.create_task_group() as tg:
            tg.start_soon(register_slowly)
            tg.start_soon(check_health)

    assert timings["health"] < timings["register"] / 2
    assert timings["health"] < 0.5
