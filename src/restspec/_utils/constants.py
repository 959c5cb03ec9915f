# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"

# Values outside ASCII are sent as UTF-8
HEADER_ENCODING = "utf-8"

# Media types
APPLICATION_JSON = "application/json"
APPLICATION_FORM_URLENCODED = "application/x-www-form-urlencoded"
MULTIPART_FORM_DATA = "multipart/form-data"
MULTIPART_MIXED = "multipart/mixed"
MULTIPART_FAMILY = "multipart"

# Multipart field that carries a serialized body next to attachments
MULTIPART_BODY_KEY = "body"

# Basic auth credentials charset
BASIC_AUTH_CHARSET = "iso-8859-1"

# Environment variables
ENV_BASE_URL = "RESTSPEC_BASE_URL"
ENV_TIMEOUT = "RESTSPEC_TIMEOUT"
ENV_FOLLOW_REDIRECTS = "RESTSPEC_FOLLOW_REDIRECTS"
ENV_MAX_WORKERS = "RESTSPEC_MAX_WORKERS"

# Files
DOTENV_FILE = ".env"
