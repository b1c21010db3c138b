import os
from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


class Config:
    """Runtime settings, read once and handed to the app factory."""

    def __init__(self, youtube_api_key=None, log_level=DEFAULT_LOG_LEVEL,
                 host=DEFAULT_HOST, port=DEFAULT_PORT, debug=False):
        self.youtube_api_key = youtube_api_key
        self.log_level = log_level
        self.host = host
        self.port = port
        self.debug = debug

    @classmethod
    def from_env(cls):
        load_dotenv()
        return cls(
            youtube_api_key=os.environ.get('YOUTUBE_API_KEY') or None,
            log_level=os.environ.get('LOG_LEVEL', DEFAULT_LOG_LEVEL).upper(),
            host=os.environ.get('HOST', DEFAULT_HOST),
            port=int(os.environ.get('PORT', DEFAULT_PORT)),
            debug=os.environ.get('FLASK_DEBUG', '').lower() in ('1', 'true', 'yes'),
        )

    def __repr__(self):
        # never print the key itself
        return (f"Config(youtube_api_key={'set' if self.youtube_api_key else 'missing'}, "
                f"log_level={self.log_level!r}, host={self.host!r}, port={self.port}, debug={self.debug})")
