"""Default settings for talking to the Lens patent search."""

LENS_SEARCH_BASE = "https://www.lens.org/lens/search?q="
LENS_PAGINATED_BASE = "https://www.lens.org/lens/search?p="

# Lens serves at most 50 records per page and 10 pages per query
PAGE_SIZE = 50
MAX_RESULTS = 500

# Delay between page requests (seconds)
DEFAULT_THROTTLE_SEC = 20.0

DEFAULT_UA = "lensurls/0.1 (+https://www.lens.org)"
DEFAULT_TIMEOUT_SEC = 30

CONFIG_ENV_VAR = "LENSURLS_CONFIG"
