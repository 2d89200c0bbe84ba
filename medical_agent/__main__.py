import logging

import uvicorn

from .config import get_host, get_port, setup_logging

logger = logging.getLogger(__name__)


def main():
    setup_logging()
    host, port = get_host(), get_port()
    logger.info("Server running on http://localhost:%d", port)
    uvicorn.run("medical_agent.app:app", host=host, port=port)


if __name__ == "__main__":
    main()
