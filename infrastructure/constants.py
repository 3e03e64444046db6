from pathlib import Path

# Repo-root conventional directories/files (overrideable via app.yaml / env)
CONFIG_DIR = Path("configs")
APP_CONFIG_FILE = CONFIG_DIR / "app.yaml"

DATA_DIR = Path("data")
TAXONOMY_CSV_FILE = DATA_DIR / "coffeeflavorwheel.csv"

# Submission log defaults
SURVEY_LIST_KEY = "coffee-surveys"
MAX_SUBMISSIONS = 1000
DEFAULT_LIST_LIMIT = 100
DISPLAY_TIMEZONE = "Asia/Tokyo"

# Environment variable names (Vercel KV / Upstash REST naming)
ENV_KV_REST_URL = "KV_REST_API_URL"
ENV_KV_REST_TOKEN = "KV_REST_API_TOKEN"
ENV_STORE_BACKEND = "SURVEY_STORE_BACKEND"
ENV_TAXONOMY_SOURCE = "TAXONOMY_SOURCE"
