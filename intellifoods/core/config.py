import os

# --- Version / build metadata (override via systemd env) ---
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
GIT_SHA = os.getenv("GIT_SHA", "unknown")
BUILD_DATE = os.getenv("BUILD_DATE", "unknown")

# Session, inventory and recipe services all live behind the same web backend
BACKEND_BASE_URL = os.getenv("BACKEND_BASE_URL", "http://127.0.0.1:3000")

SESSION_PATH = os.getenv("SESSION_PATH", "/api/auth/session")
SIGNOUT_PATH = os.getenv("SIGNOUT_PATH", "/api/auth/signout")
FRIDGE_DATA_PATH = os.getenv("FRIDGE_DATA_PATH", "/api/home/fridge-data")
STORAGE_PATH_TEMPLATE = os.getenv("STORAGE_PATH_TEMPLATE", "/api/home/{location}")
RECIPES_PATH = os.getenv("RECIPES_PATH", "/api/home/recipes")

# Where the UI should send the user when a session is required
SIGNIN_REDIRECT = os.getenv("SIGNIN_REDIRECT", "/signin")

SESSION_TIMEOUT_S = float(os.getenv("SESSION_TIMEOUT_S", "5"))
INVENTORY_TIMEOUT_S = float(os.getenv("INVENTORY_TIMEOUT_S", "10"))
STORAGE_TIMEOUT_S = float(os.getenv("STORAGE_TIMEOUT_S", "10"))
# Generation is slow (LLM + image lookup on the backend)
RECIPE_TIMEOUT_S = float(os.getenv("RECIPE_TIMEOUT_S", "120"))
