from __future__ import annotations

import sys
from pathlib import Path

# Allow running as: python scripts/users_smoketest.py
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from fastapi.testclient import TestClient

from user_service.main import create_app


def main() -> int:
    c = TestClient(create_app())

    r = c.get("/users")
    print("/users(empty)", r.status_code, r.json())

    r = c.post("/users", json={"name": "A", "email": "a@x.com", "age": 25})
    print("POST /users", r.status_code, r.json())
    if r.status_code != 201:
        return 1
    user_id = r.json()["id"]

    r = c.put(f"/users/{user_id}", json={"name": "B", "email": "b@x.com", "age": 30})
    print(f"PUT /users/{user_id}", r.status_code, r.json())

    r = c.delete(f"/users/{user_id}")
    print(f"DELETE /users/{user_id}", r.status_code)

    r = c.get(f"/users/{user_id}")
    print(f"GET /users/{user_id}", r.status_code, r.json())

    return 0 if r.status_code == 404 else 1


if __name__ == "__main__":
    raise SystemExit(main())
