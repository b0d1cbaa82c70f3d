"""Development entry point.

Starts the Werkzeug server on ``PORT`` (default 5000). The configuration
class is picked from ``APP_ENV`` / ``FLASK_ENV``:

- ``production`` → ProductionConfig
- ``testing`` → TestingConfig
- anything else → DevelopmentConfig

In production use ``gunicorn -c deploy/gunicorn.conf.py wsgi:app``.
"""

from env_loader import load_dotenv_like

# Load .env before the config module reads os.environ
load_dotenv_like()

from reidentify import create_app
from reidentify.config import select_config_class


def main() -> None:
    app = create_app(select_config_class())
    port = int(app.config.get("PORT", 5000))

    app.logger.info("ReIDentify Backend Server running on http://localhost:%s", port)
    app.logger.info("Health check available at http://localhost:%s/api/health", port)

    app.run(host="0.0.0.0", port=port, debug=app.config.get("DEBUG", False))


if __name__ == "__main__":
    main()
