import os
import logging
from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

# Configure logging
logging.basicConfig(level=os.environ.get("LOG_LEVEL", "DEBUG").upper())

def create_app(config=None):
    """Application factory pattern"""
    app = Flask(__name__)
    app.secret_key = os.environ.get("SESSION_SECRET", "dev-secret-key-change-in-production")
    app.wsgi_app = ProxyFix(app.wsgi_app, x_proto=1, x_host=1)

    # Configure upload settings
    app.config['MAX_CONTENT_LENGTH'] = int(os.environ.get("MAX_UPLOAD_MB", "50")) * 1024 * 1024
    app.config['SHOW_ERROR_DETAILS'] = os.environ.get("APP_ENV", "development") != "production"

    if config:
        app.config.update(config)

    # Register routes
    from routes import register_routes
    register_routes(app)

    return app

# Create the app instance
app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=5000, debug=True)
