"""Run FastAPI server."""
import logging

import uvicorn

from community_roots.api.main import app
from community_roots.config import configure_logging

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    configure_logging()
    logger.info("Starting FastAPI on http://localhost:8000")
    uvicorn.run(app, host="0.0.0.0", port=8000)
