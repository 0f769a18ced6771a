from flask import Flask
from flask_migrate import Migrate
from flask_smorest import Api

from lifestyle.db import db
from lifestyle.config import Config, setup_logger
from lifestyle.api.v1.routes import (
    goals_bp,
    tasks_bp,
    logs_bp,
    scores_bp,
    dashboard_bp,
    reviews_bp,
)

logger = setup_logger(name="App")
migrate = Migrate()


def create_app(config_class=Config):
    """Application factory"""
    app = Flask(__name__)
    app.config.from_object(config_class)

    db.init_app(app)
    migrate.init_app(app, db)
    api = Api(app)

    # Create all database tables
    with app.app_context():
        db.create_all()

    # Register API blueprints
    api.register_blueprint(goals_bp)
    api.register_blueprint(tasks_bp)
    api.register_blueprint(logs_bp)
    api.register_blueprint(scores_bp)
    api.register_blueprint(dashboard_bp)
    api.register_blueprint(reviews_bp)

    logger.info(f"App created with database {app.config['SQLALCHEMY_DATABASE_URI']}")
    return app
