"""Run the API with uvicorn: python -m personality_api"""

import uvicorn

from personality_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "personality_api.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
