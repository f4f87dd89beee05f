from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scoopdash.api import analysis_router, health_router
from scoopdash.config import settings

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("scoopdash"),
    debug=settings.debug,
)

app.include_router(analysis_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
