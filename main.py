import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from db import init_db
from routers.admin import router as admin_router

# Routers
from routers.arena import router as arena_router
from routers.health import router as health_router
from routers.learning import router as learning_router
from routers.marking import router as marking_router
from seed import seed_defaults

logger = logging.getLogger("integer-arena")
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

# fresh SQLite files work without running migrations first
init_db()
seeded = seed_defaults()
logger.info("database ready (%s)", ", ".join(f"{k}+{v}" for k, v in seeded.items()))

app = FastAPI(title="Integer Arena API")

# Allow calls from the Vite dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(arena_router)  # /api/login, /api/questions/{level}, /api/scores, /api/leaderboard
app.include_router(marking_router)  # /api/mark
app.include_router(learning_router)  # /api/learning/walk
app.include_router(admin_router)  # /api/admin/...
app.include_router(health_router)  # /health/...
