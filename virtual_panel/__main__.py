"""Run the API with uvicorn: `python -m virtual_panel`."""
import uvicorn
from loguru import logger

from virtual_panel.core.config import settings


def main():
    logger.info(f"Server running on port {settings.port}")
    logger.info(f"Health check: http://localhost:{settings.port}/api/health")
    uvicorn.run(
        "virtual_panel.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
