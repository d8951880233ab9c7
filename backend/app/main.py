from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.core import config
from app.core.logger import setup_logging
from app.core.init_db import init_db
from app.core.limiter import limiter

# Import Database & Models
from app.core.database import engine, SessionLocal
from app.modules.users import models as user_models
from app.modules.auth.router import router as auth_router
from app.modules.actions.router import router as actions_router
from app.modules.sites.router import router as site_router
from app.modules.server.router import router as server_router

setup_logging(config.LOG_LEVEL, config.LOG_FILE)

app = FastAPI(title="ServerPanel API", version="0.1.0")

# --- RATE LIMIT (login) ---
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# --- CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,  # Jangan pernah pakai ["*"] di production
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# --- Register Router ---
app.include_router(auth_router)
app.include_router(actions_router)
app.include_router(site_router)
app.include_router(server_router)


@app.on_event("startup")
def startup_event():
    # Auto migrate tabel users kalau belum ada
    user_models.Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        init_db(db)
    finally:
        db.close()


@app.get("/")
def read_root():
    return {"message": "ServerPanel API is Ready!"}
