# app.py
from flask import Flask, jsonify, request, g
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix
from dotenv import load_dotenv
from routes.bible import bible_bp
from routes.static import static_bp
from utils.errors import ApiError
from config import Config, resolve_port
import argparse
import logging
import time
import sys

# Configure logging to output to stdout
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

def create_app(config_overrides=None):
    # Flask's own /static route is disabled; routes.static serves PUBLIC_DIR
    app = Flask(__name__, static_folder=None)
    app.config.update(Config.from_env())
    if config_overrides:
        app.config.update(config_overrides)

    logging.getLogger().setLevel(app.config['LOG_LEVEL'])

    # Use ProxyFix to handle proxy headers properly
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    # Pretty-printed JSON, keys in insertion order
    app.json.sort_keys = False
    app.json.compact = False

    CORS(app, resources={
        r"/api/*": {
            "origins": "*",
            "methods": ["GET", "OPTIONS"],
            "allow_headers": ["Content-Type", "Accept"],
        }
    })

    # Ensure URLs with or without trailing slashes are handled the same way
    app.url_map.strict_slashes = False

    app.register_blueprint(bible_bp, url_prefix='/api')
    app.register_blueprint(static_bp)

    @app.before_request
    def before_request():
        g.start_time = time.perf_counter()

    @app.after_request
    def after_request(response):
        duration_ms = (time.perf_counter() - g.get('start_time', time.perf_counter())) * 1000
        size = response.content_length or 0
        logger.info(f"{request.method} {request.path} {response.status_code} {duration_ms:.1f}ms {size}b")
        return response

    @app.errorhandler(ApiError)
    def handle_api_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'ok': False, 'error': e.name.lower()}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.error(f"Unhandled error on {request.path}: {str(e)}", exc_info=True)
        return jsonify({'ok': False, 'error': str(e)}), 500

    logger.info(f"Serving chapters from {app.config['BIBLE_DIR']}, static files from {app.config['PUBLIC_DIR']}")
    return app

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Serve the Bible chapter JSON API and front end.')
    parser.add_argument('--port', help='port to listen on (overrides $PORT)')
    parser.add_argument('--host', help='interface to bind (overrides $HOST)')
    parser.add_argument('--debug', action='store_true', help='enable the Flask debugger and reloader')
    return parser.parse_args(argv)

app = create_app()

if __name__ == '__main__':
    args = parse_args()
    port = resolve_port(args.port)
    host = args.host or app.config['HOST']
    print(f"Server running at http://{host}:{port}")
    app.run(host=host, port=port, debug=args.debug)
