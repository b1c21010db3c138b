"""
Error taxonomy for the YouTube metadata proxy.
Every error carries the HTTP status the handler answers with.
"""


class ProxyError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(ProxyError):
    """Bad client input."""
    status_code = 400


class MethodNotAllowedError(ProxyError):
    status_code = 405


class ConfigError(ProxyError):
    """Server is missing required configuration (e.g. the API key)."""
    status_code = 500


class YouTubeAPIError(ProxyError):
    """Base for failures coming from the YouTube Data API."""
    status_code = 500


class QuotaOrAuthError(YouTubeAPIError):
    pass


class NotFoundError(YouTubeAPIError):
    pass


class UpstreamError(YouTubeAPIError):
    def __init__(self, message, upstream_status=None, upstream_reason=None):
        super().__init__(message)
        self.upstream_status = upstream_status
        self.upstream_reason = upstream_reason
