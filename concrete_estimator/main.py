from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import reinforcement, volume

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("concrete_estimator")

app = FastAPI(
    title=settings.APP_NAME,
    description="Rebar, fiber and mesh estimating for concrete contractors",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(reinforcement.router, prefix="/api")
app.include_router(volume.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "concrete-estimator"}
