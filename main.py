# FastAPI application entrypoint (conditional /api prefix)
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from futurepress.core.config import origins, APP_ENV, LOG_LEVEL

# Routers
from futurepress.api.routes_drafts import router as drafts_router
from futurepress.api.routes_coach import router as coach_router

logging.getLogger("uvicorn.error").setLevel(LOG_LEVEL)

# Use /api in production/staging, no prefix in development (local)
API_PREFIX = "/api" if (APP_ENV or "development").lower() != "development" else ""

app = FastAPI(title="Future Press Release Coach")

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers w/ conditional prefix
app.include_router(drafts_router, prefix=API_PREFIX)
app.include_router(coach_router,  prefix=API_PREFIX)

# Healthchecks (one unprefixed, optionally one prefixed in prod)
@app.get("/healthz")
def healthz():
    return {"status": "ok", "env": APP_ENV, "prefix": API_PREFIX or "/"}

if API_PREFIX:
    @app.get(f"{API_PREFIX}/healthz")
    def healthz_api():
        return {"status": "ok", "env": APP_ENV, "prefix": API_PREFIX}
