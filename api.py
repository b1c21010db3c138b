import logging
from datetime import datetime, timezone
from flask import Flask, request, jsonify
from config import Config
from errors import ProxyError, ValidationError, MethodNotAllowedError, ConfigError
from youtube_client import extract_video_id, fetch_video_metadata

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    'Access-Control-Allow-Credentials': 'true',
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET,OPTIONS,POST',
    'Access-Control-Allow-Headers': 'X-Requested-With, Content-Type, Accept'
}

PROXY_PATH = '/api/youtube-proxy'
PROXY_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


def utc_timestamp():
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def error_response(message, status):
    return jsonify({'success': False, 'error': message}), status


def create_app(config=None, session=None):
    """
    Build the proxy app. `config` supplies the YouTube API key; `session`
    is an optional requests.Session used for the upstream call.
    """
    config = config or Config.from_env()
    logging.basicConfig(level=config.log_level, format='%(asctime)s %(levelname)s %(message)s')

    app = Flask(__name__)

    @app.before_request
    def log_request_info():
        logger.info(f"{request.method} {request.path} - {request.remote_addr}")

    @app.after_request
    def add_cors_headers(response):
        for header, value in CORS_HEADERS.items():
            response.headers[header] = value
        return response

    @app.errorhandler(405)
    def method_not_allowed(e):
        if request.path == PROXY_PATH:
            return error_response('Method not allowed. Use POST.', 405)
        return error_response('Method not allowed.', 405)

    @app.route('/api/hello', methods=['GET', 'POST'])
    def hello():
        return jsonify({
            'success': True,
            'message': 'Hello from the YouTube metadata proxy!',
            'method': request.method,
            'timestamp': utc_timestamp()
        })

    @app.route(PROXY_PATH, methods=PROXY_METHODS)
    def youtube_proxy():
        # Preflight
        if request.method == 'OPTIONS':
            logger.debug('OPTIONS request handled')
            return '', 200
        try:
            if request.method != 'POST':
                logger.warning(f'Method not allowed: {request.method}')
                raise MethodNotAllowedError('Method not allowed. Use POST.')

            data = request.get_json(force=True, silent=True) or {}
            url = data.get('url') if isinstance(data, dict) else None
            if not url:
                raise ValidationError('URL parameter is required')

            video_id = extract_video_id(url)
            logger.info(f'Extracted video ID: {video_id}')
            if not video_id:
                raise ValidationError('Invalid YouTube URL format')

            logger.debug(f'API key configured: {bool(config.youtube_api_key)}')
            if not config.youtube_api_key:
                logger.error('YOUTUBE_API_KEY is not configured')
                raise ConfigError('Server configuration error')

            metadata = fetch_video_metadata(video_id, config.youtube_api_key, session=session)
            logger.info(f'YouTube API success for {video_id}')
            return jsonify({
                'success': True,
                'videoId': video_id,
                'url': url,
                'contentType': 'youtube',
                **metadata,
                'extractedAt': utc_timestamp()
            }), 200
        except ProxyError as e:
            logger.warning(f'/api/youtube-proxy {e.status_code}: {e.message}')
            return error_response(e.message, e.status_code)
        except Exception as e:
            logger.error(f'/api/youtube-proxy error: {e}', exc_info=True)
            return error_response(str(e) or 'Internal server error', 500)

    return app


if __name__ == '__main__':
    config = Config.from_env()
    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=config.debug)
