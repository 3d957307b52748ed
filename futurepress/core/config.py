import os
from dotenv import load_dotenv
load_dotenv()

APP_ENV = os.getenv("APP_ENV", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS (comma-separated override for deployed form hosts)
_DEFAULT_ORIGINS = "http://localhost:3000,http://localhost:5173"
origins = [o.strip() for o in os.getenv("CORS_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()]
