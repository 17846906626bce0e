"""Entry: start the API server."""
import logging

import uvicorn

from recordshop.config import API_HOST, API_PORT, API_RELOAD

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    uvicorn.run(
        "recordshop.api.app:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_RELOAD,
    )
