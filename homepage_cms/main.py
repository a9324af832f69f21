"""
homepage_cms : FastAPI app
Démarrer : uvicorn homepage_cms.main:app --reload --port 3000
"""
import logging

from fastapi import FastAPI

from .core import Settings
from .router import router

logging.basicConfig(
    level=Settings.from_env().log_level,
    format="%(asctime)s %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(title="homepage_cms", version="0.1.0", docs_url="/docs")
app.include_router(router)


@app.get("/health")
def health():
    return {"status": "ok", "service": "homepage_cms", "version": "0.1.0"}
