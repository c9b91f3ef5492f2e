"""
PixelTrack Web Interface - Flask Application
"""
from typing import Optional

from flask import Flask

from pixeltrack.config import config
from pixeltrack.database.manager import DatabaseManager
from pixeltrack.routes import register_error_handlers, stats_bp, tracking_bp


def create_app(db_manager: Optional[DatabaseManager] = None) -> Flask:
    """Build the Flask app around a ready (migrated) database manager"""
    app = Flask(__name__)

    if db_manager is None:
        config.ensure_dirs()
        db_manager = DatabaseManager(config.DB_PATH)

    # Blueprints look the store up through current_app
    app.db_manager = db_manager

    app.register_blueprint(tracking_bp)
    app.register_blueprint(stats_bp)
    register_error_handlers(app)

    return app


if __name__ == '__main__':
    from pixeltrack.utils.logger import setup_logging

    setup_logging()
    app = create_app()
    app.run(debug=False, host=config.HOST, port=config.PORT, threaded=True)
