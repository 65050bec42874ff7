"""
Configuration - environment driven settings.

Values are read once at import. A local .env file is loaded first so
development setups don't need exported variables.
"""
import os

from dotenv import load_dotenv

load_dotenv()

# Storage backend: "memory" or "redis"
CART_STORE_BACKEND = os.environ.get("CART_STORE_BACKEND", "memory").strip().lower()

# Upstash Redis - standard env var names per docs
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")

# Display
CURRENCY_LABEL = os.environ.get("CURRENCY_LABEL", "Ksh")

# Toast timings (milliseconds)
TOAST_SHOW_DELAY_MS = int(os.environ.get("TOAST_SHOW_DELAY_MS", "10"))
TOAST_DISMISS_DELAY_MS = int(os.environ.get("TOAST_DISMISS_DELAY_MS", "3000"))

# Web surface
CART_SESSION_COOKIE = os.environ.get("CART_SESSION_COOKIE", "cart_session")

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()

# Most-recently-used sessions kept in process; evicted ones rebuild from the store
CART_SESSION_LIMIT = int(os.environ.get("CART_SESSION_LIMIT", "1000"))
