import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from formmapper import __version__
from formmapper.config import settings
from formmapper.routes import extract, health, mappings

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title="Form Mapper API",
    description="Extract answers from saved Google Forms pages and map them to JSON",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(extract.router, prefix="/api", tags=["extract"])
app.include_router(mappings.router, prefix="/api/mappings", tags=["mappings"])
app.include_router(health.router, prefix="/api/health", tags=["health"])
