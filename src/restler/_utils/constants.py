# Environment variables
ENV_BASE_URL = "RESTLER_BASE_URL"
ENV_TIMEOUT = "RESTLER_TIMEOUT"
ENV_DISABLE_SSL_VERIFY = "RESTLER_DISABLE_SSL_VERIFY"

# Headers
HEADER_USER_AGENT = "User-Agent"

USER_AGENT = "restler-python"

# Content types
CONTENT_TYPE_FORM_URLENCODED = "application/x-www-form-urlencoded"
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_MULTIPART = "multipart/form-data; charset=utf-8; boundary={boundary}"
CONTENT_TYPE_OCTET_STREAM = "application/octet-stream"

# Multipart
MULTIPART_BOUNDARY_PREFIX = "Boundary--"

# Logging
LOGGER_NAME = "restler"

DEFAULT_TIMEOUT = 30.0
