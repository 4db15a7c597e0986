API_VERSION_HEADER = "X-Toolkit-Version"

# Authentication
AUTH_HEADER = "Authorization"

# Authentication endpoints configuration
SKIP_AUTH_PATHS = {
    "/openapi.json",
    "/docs",
    "/redoc",
    "/health",
    "/health/",
    "/health/liveness",
    "/",
    "/v1/tools/catalog",
}

# Request bodies carry the text to process; articles are the largest
MAX_REQUEST_SIZE = 1024 * 1024

# Pagination
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100
