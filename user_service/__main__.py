from __future__ import annotations

import uvicorn

from user_service.main import app
from user_service.settings import get_settings


def main() -> int:
    s = get_settings()
    uvicorn.run(app, host=s.host, port=s.port, log_level=s.log_level.lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
