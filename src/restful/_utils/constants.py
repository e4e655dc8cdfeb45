# Environment variables
ENV_TIMEOUT = "RESTFUL_TIMEOUT"
ENV_CONNECT_TIMEOUT = "RESTFUL_CONNECT_TIMEOUT"
ENV_VERIFY_TLS = "RESTFUL_VERIFY_TLS"
ENV_HTTP2 = "RESTFUL_HTTP2"

ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"

# Content types
APPLICATION_JSON = "application/json"

LOGGER_NAME = "restful"
