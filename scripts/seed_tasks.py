"""
Seed script — submits a handful of sample tasks for demo purposes.

Usage:
    python -m scripts.seed_tasks

This creates a mix that makes the three policies visibly disagree:
- a long, low-priority batch job submitted first (FCFS runs it first)
- a short, high-priority task (SJF and Priority both like it)
- two tasks that tie on execution time, two that tie on priority

Run this after `uvicorn api.main:app` to populate the simulator.
"""

import httpx

BASE_URL = "http://localhost:8000"


def seed():
    client = httpx.Client(base_url=BASE_URL, timeout=10.0)

    tasks = [
        {"name": "Nightly backup", "execution_time": 12, "priority": 2},
        {"name": "Keyboard interrupt", "execution_time": 1, "priority": 10},
        {"name": "Compile module", "execution_time": 5, "priority": 5},
        {"name": "Render thumbnail", "execution_time": 5, "priority": 7},
        {"name": "Send email", "execution_time": 3, "priority": 7},
        {"name": "Index search", "execution_time": 8, "priority": 4},
    ]

    print(f"Submitting {len(tasks)} tasks to {BASE_URL}...\n")

    for task in tasks:
        resp = client.post("/tasks/", json=task)
        resp.raise_for_status()
        data = resp.json()
        print(
            f"  [{data['status']}] #{data['id']} {data['name']} "
            f"(exec={data['execution_time']}, priority={data['priority']})"
        )

    print("\nDone! Now drive the clock:")
    print("Step once:     curl -X POST http://localhost:8000/scheduler/step")
    print("Real time:     curl -X POST http://localhost:8000/scheduler/start")
    print("Statistics:    curl http://localhost:8000/scheduler/stats")


if __name__ == "__main__":
    seed()
