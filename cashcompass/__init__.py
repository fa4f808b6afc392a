from flask import Flask, jsonify
from .extensions import db, migrate, login_manager, cors
from .config import Config
from .errors import register_error_handlers

from .blueprints.auth.routes import auth_bp
from .blueprints.entries.routes import entries_bp
from .blueprints.budget.routes import budget_bp
from .blueprints.summary.routes import summary_bp
from .blueprints.weekly_plan.routes import weekly_plan_bp


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    # Ensure tables exist for a smooth first run
    with app.app_context():
        from . import models  # noqa: F401  registers tables on db.metadata
        db.create_all()

    register_error_handlers(app)

    # Register blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(entries_bp)
    app.register_blueprint(budget_bp)
    app.register_blueprint(summary_bp)
    app.register_blueprint(weekly_plan_bp)

    @app.route("/")
    def root():
        return jsonify({"message": "CashCompass Backend Running!"})

    return app
