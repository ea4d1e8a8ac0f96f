from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from scandalscope.api.errors import invalid_request_handler, request_validation_handler
from scandalscope.api.routes import search
from scandalscope.config import get_settings
from scandalscope.errors import InvalidRequestError
from scandalscope.services.logger import configure_logging

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging(settings)
    yield
    # Shutdown


app = FastAPI(
    title="ScandalScope",
    description="Controversy history search for public figures",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(InvalidRequestError, invalid_request_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)

# Routes
app.include_router(search.router)


@app.get("/api/health")
async def health():
    return {"status": "ok", "service": "scandalscope"}
