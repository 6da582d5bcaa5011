import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Routers
from routers.health import router as health_router
from routers.questions import router as questions_router

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ALLOW_ORIGINS = [
    o.strip()
    for o in os.getenv(
        "CORS_ALLOW_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    ).split(",")
    if o.strip()
]

logger = logging.getLogger("quiz-catalog")
logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title="Quiz Question Catalog")

# Read-only API: only GET is exposed to browsers
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(questions_router)  # /questions
app.include_router(health_router)  # /health/catalog
