"""Run the service with uvicorn: python -m minibank"""

import uvicorn

from minibank.config import settings


def main() -> None:
    uvicorn.run(
        "minibank.api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the JSON logging installed by the app
    )


if __name__ == "__main__":
    main()
