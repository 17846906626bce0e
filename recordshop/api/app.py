"""FastAPI app, CORS, error rendering and route registration."""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s: %(message)s",
)

from recordshop.api.state import AppState, get_state
from recordshop.errors import RecordShopError

# Import routes after state to avoid circular imports
from recordshop.api.routes import auth, catalog, records

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Record Shop API",
    description="Inventory REST API for the record shop",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RecordShopError)
async def record_shop_error_handler(request: Request, exc: RecordShopError):
    if exc.status_code >= 500:
        logger.error("%s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.get("/", response_class=PlainTextResponse)
def health():
    return "Record Shop API is running"


app.include_router(auth.router, prefix="/api", tags=["auth"])
app.include_router(catalog.router, prefix="/api", tags=["catalog"])
app.include_router(records.router, prefix="/api/records", tags=["records"])
