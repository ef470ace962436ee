# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Defaults
DEFAULT_CONTENT_TYPE = "application/json"
DEFAULT_USER_AGENT = "HttpBridge/1.0"
DEFAULT_MAX_WORKERS = 4
DEFAULT_LOG_LEVEL = "WARNING"

# Fixed per-request timeout in seconds, applied to every request
REQUEST_TIMEOUT_SECONDS = 30.0

HTTP_SCHEME = "http://"
HTTPS_SCHEME = "https://"

# Environment variables
ENV_USER_AGENT = "HTTPBRIDGE_USER_AGENT"
ENV_MAX_WORKERS = "HTTPBRIDGE_MAX_WORKERS"
ENV_LOG_LEVEL = "HTTPBRIDGE_LOG_LEVEL"

DOTENV_FILE = ".env"
