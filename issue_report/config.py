"""Configuration constants for the issue report."""

# Repositories scanned when none are given on the command line
DEFAULT_REPOSITORIES = (
    "https://github.com/web-platform-tests/interop",
)

# Label names of interest, in priority-free order (issue label order decides)
DEFAULT_LABELS = (
    "focus-area-proposal",
    "investigation-effort-proposal",
)

DEFAULT_OUTPUT_PATH = "issues.json"

# ── GitHub API ───────────────────────────────────────────────
GITHUB_HOST = "github.com"
API_BASE_URL = "https://api.github.com"
API_VERSION = "2022-11-28"
USER_AGENT = "issue-report"
PER_PAGE = 100
REQUEST_TIMEOUT_S = 30

# ── Throttling ───────────────────────────────────────────────
MAX_RATE_LIMIT_RETRIES = 2
DEFAULT_RETRY_AFTER_S = 60
