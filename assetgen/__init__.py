# assetgen/__init__.py
from flask import Flask
from .extensions import csrf, limiter
from flask_wtf.csrf import CSRFError
from werkzeug.exceptions import InternalServerError, RequestEntityTooLarge


def create_app(overrides=None):
    app = Flask(__name__, template_folder="templates")

    # Load config
    app.config.from_object('config')
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    csrf.init_app(app)
    limiter.init_app(app)

    # Register Blueprints
    from .routes.assets import bp as assets_bp
    app.register_blueprint(assets_bp)

    from .routes.main import bp as main_bp
    app.register_blueprint(main_bp)

    @app.errorhandler(CSRFError)
    def handle_csrf(err):
        from flask import jsonify
        return jsonify(error="CSRF token missing or invalid"), 400

    @app.errorhandler(RequestEntityTooLarge)
    def handle_large_file(err):
        from flask import request, jsonify
        if request.accept_mimetypes.accept_json or request.path.startswith("/api/"):
            return jsonify(error="Request body is too large or invalid", max_bytes=app.config.get("MAX_CONTENT_LENGTH")), 413
        return ("File too large", 413)

    @app.errorhandler(InternalServerError)
    def handle_internal(err):
        from flask import request, jsonify
        original = getattr(err, "original_exception", None)
        if original is not None:
            app.logger.error("Unhandled error on %s", request.path, exc_info=original)
        if request.path.startswith("/api/"):
            return jsonify(error="An unexpected error occurred. Please try again."), 500
        return ("Internal Server Error", 500)

    # Lightweight health check
    @app.get("/healthz")
    def healthz():
        return "ok"

    return app
