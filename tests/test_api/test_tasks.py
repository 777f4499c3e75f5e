"""
API integration tests for /tasks endpoints.

These use the test HTTP client from conftest.py, which talks to the FastAPI
app with a fresh in-process engine. No server, no network.
"""

import pytest


@pytest.mark.asyncio
async def test_create_task(client):
    """POST /tasks/ should create a task and return it WAITING."""
    response = await client.post("/tasks/", json={
        "name": "compile",
        "execution_time": 3,
        "priority": 7,
    })

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "compile"
    assert data["status"] == "waiting"
    assert data["execution_time"] == 3
    assert data["remaining_time"] == 3
    assert data["priority"] == 7
    assert data["arrival_time"] == 0
    assert data["start_time"] == -1
    assert data["end_time"] == -1
    assert data["id"] == 1


@pytest.mark.asyncio
async def test_create_task_with_defaults(client):
    response = await client.post("/tasks/", json={"name": "minimal"})

    assert response.status_code == 201
    data = response.json()
    assert data["execution_time"] == 5
    assert data["priority"] == 1


@pytest.mark.asyncio
async def test_create_task_zero_execution_time(client):
    response = await client.post("/tasks/", json={"name": "bad", "execution_time": 0})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_task_priority_out_of_range(client, engine):
    """Priority above MAX_PRIORITY is rejected by the engine → 422, nothing stored."""
    response = await client.post("/tasks/", json={"name": "bad", "priority": 99})

    assert response.status_code == 422
    assert "priority" in response.json()["detail"]
    assert engine.snapshot().tasks == []


@pytest.mark.asyncio
async def test_create_task_blank_name(client):
    response = await client.post("/tasks/", json={"name": "   "})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_arrival_time_follows_clock(client):
    await client.post("/scheduler/step", params={"ticks": 4})
    response = await client.post("/tasks/", json={"name": "late"})

    assert response.json()["arrival_time"] == 4


@pytest.mark.asyncio
async def test_get_task_by_id(client):
    create_response = await client.post("/tasks/", json={"name": "findable"})
    task_id = create_response.json()["id"]

    response = await client.get(f"/tasks/{task_id}")
    assert response.status_code == 200
    assert response.json()["name"] == "findable"


@pytest.mark.asyncio
async def test_get_nonexistent_task(client):
    response = await client.get("/tasks/12345")
    assert response.status_code == 404
    assert response.json()["detail"] == "Task 12345 not found"


@pytest.mark.asyncio
async def test_list_tasks_and_filter_by_status(client):
    await client.post("/tasks/", json={"name": "short", "execution_time": 1})
    await client.post("/tasks/", json={"name": "long", "execution_time": 6})
    await client.post("/scheduler/step")

    response = await client.get("/tasks/")
    assert response.status_code == 200
    assert response.json()["total"] == 2
    assert [t["name"] for t in response.json()["tasks"]] == ["short", "long"]

    running = await client.get("/tasks/", params={"status": "running"})
    assert [t["name"] for t in running.json()["tasks"]] == ["short"]

    waiting = await client.get("/tasks/", params={"status": "waiting"})
    assert [t["name"] for t in waiting.json()["tasks"]] == ["long"]


@pytest.mark.asyncio
async def test_remove_waiting_task(client):
    create_response = await client.post("/tasks/", json={"name": "remove me"})
    task_id = create_response.json()["id"]

    response = await client.delete(f"/tasks/{task_id}")
    assert response.status_code == 204

    get_response = await client.get(f"/tasks/{task_id}")
    assert get_response.status_code == 404


@pytest.mark.asyncio
async def test_remove_running_task_conflicts(client):
    create_response = await client.post("/tasks/", json={"name": "busy", "execution_time": 3})
    task_id = create_response.json()["id"]
    await client.post("/scheduler/step")

    response = await client.delete(f"/tasks/{task_id}")
    assert response.status_code == 409
    assert "running" in response.json()["detail"]

    get_response = await client.get(f"/tasks/{task_id}")
    assert get_response.json()["status"] == "running"


@pytest.mark.asyncio
async def test_remove_unknown_task(client):
    response = await client.delete("/tasks/777")
    assert response.status_code == 404
