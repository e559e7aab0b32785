"""Serve the API on the configured network's host and port."""

import logging

import uvicorn

from chimera.core.config import get_settings

logger = logging.getLogger("chimera")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    network = get_settings().active_network
    logger.info("server.starting network=%s host=%s port=%s", network.name, network.host, network.port)
    uvicorn.run("chimera.main:app", host=network.host, port=network.port)


if __name__ == "__main__":
    main()
