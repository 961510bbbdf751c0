import logging

from flask import Flask
from .extensions import cors, csrf, store, backend, dashboard


def create_app(overrides=None):
    """App factory serving both the submissions API and the dashboard.

    ``overrides`` is applied on top of ``config.Config``; tests use it to point
    DATA_FILE and SHORTLIST_FILE at temporary paths.
    """
    app = Flask(__name__)
    app.config.from_object('config.Config')
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get('CORS_ORIGINS', '*')}})
    csrf.init_app(app)
    store.init_app(app)
    backend.init_app(app)
    dashboard.init_app(app)

    from .api.submissions import bp as submissions_bp
    csrf.exempt(submissions_bp)
    app.register_blueprint(submissions_bp)

    from .blueprints.dashboard import bp as dashboard_bp
    app.register_blueprint(dashboard_bp, url_prefix="/dashboard")

    @app.get('/')
    def index():
        return "Backend is running", 200, {"Content-Type": "text/plain; charset=utf-8"}

    return app
