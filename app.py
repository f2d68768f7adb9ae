# app.py
from flask import Flask, jsonify
from config.config import Config
from db.database import SessionLocal, init_db, auto_migrate, ping
from routes.employees import bp as employees_bp
from flask_cors import CORS


def create_app(overrides=None):
    app = Flask(__name__)

    # Load config values from Config
    app.config["DEBUG"] = Config.DEBUG
    app.config["SECRET_KEY"] = Config.SECRET_KEY
    app.config["SKILL_OPTIONS"] = dict(Config.SKILL_OPTIONS)
    app.config["ENFORCE_SKILL_VOCABULARY"] = Config.ENFORCE_SKILL_VOCABULARY
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(Config.LOG_LEVEL)

    # CORS
    CORS(app, origins=Config.ALLOWED_ORIGINS, supports_credentials=True)

    # Ensure DB schema exists and apply safe auto-migrations (adds missing tables/columns)
    try:
        auto_migrate()
    except Exception:
        # Fallback to init_db if auto_migrate fails for some reason
        app.logger.exception("auto_migrate failed, falling back to init_db()")
        init_db()

    # register blueprints
    app.register_blueprint(employees_bp)

    @app.teardown_appcontext
    def remove_session(exc=None):
        SessionLocal.remove()

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/health/db", methods=["GET"])
    def health_db():
        """Simple DB health check endpoint.
        Returns 200 if DB is reachable and a basic select 1 works, otherwise returns 503.
        """
        try:
            ping()
            return jsonify({"db": "ok"})
        except Exception as e:
            app.logger.exception("DB health check failed: %s", e)
            return jsonify({"db": "error", "error": str(e)}), 503

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host=Config.APP_HOST, port=Config.APP_PORT, debug=Config.DEBUG)
