# Environment variables
ENV_URL = "SEARCHAPI_URL"
ENV_VERSION = "SEARCHAPI_VERSION"
ENV_READ_TIMEOUT = "SEARCHAPI_READ_TIMEOUT"
ENV_OPEN_TIMEOUT = "SEARCHAPI_OPEN_TIMEOUT"
ENV_DEBUG = "SEARCHAPI_DEBUG"

# Defaults
DEFAULT_URL = "http://localhost:9200"
DEFAULT_READ_TIMEOUT = 5.0
DEFAULT_OPEN_TIMEOUT = 2.0

# Logging
LOGGER_NAME = "searchapi"

# Call parameters
SCOPE_KEYS = ("index", "type", "id")
PARAM_BODY = "body"
PARAM_READ_TIMEOUT = "read_timeout"

# HTTP
SUPPORTED_METHODS = ("HEAD", "GET", "PUT", "POST", "DELETE")
METHODS_WITHOUT_BODY = ("HEAD",)
HEADER_CONTENT_TYPE = "Content-Type"
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_NDJSON = "application/x-ndjson"
