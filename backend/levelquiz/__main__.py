import logging

import uvicorn

from .settings import settings

logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)-5s [%(name)s] %(message)s")

if __name__ == "__main__":
	uvicorn.run("levelquiz.main:app", host=settings.host, port=settings.port)
