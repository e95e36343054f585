from __future__ import annotations

import uvicorn

from .app import app


def run(host: str = "0.0.0.0", port: int = 8000, reload: bool = False) -> None:
    if reload:
        uvicorn.run("mediadrop.app:app", host=host, port=port, reload=True)
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run(reload=True)
