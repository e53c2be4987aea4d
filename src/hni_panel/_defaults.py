DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_NEWS_LIMIT = 3
MAX_NEWS_LIMIT = 10
DEFAULT_CONCURRENCY = 5
DEFAULT_ACCOUNT_ID = 1

# Simulated latency shown next to each response, in milliseconds.
RESPONSE_TIME_MIN_MS = 1000
RESPONSE_TIME_MAX_MS = 4000

TABLES_ENV_VAR = "HNI_PANEL_TABLES"
