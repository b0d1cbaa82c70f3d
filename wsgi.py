"""WSGI entry point for production.

Used by gunicorn or uWSGI:
    gunicorn -c deploy/gunicorn.conf.py wsgi:app

The config class defaults to ProductionConfig and can be switched with
``APP_CONFIG`` (production / development / testing).
"""

import os

from env_loader import load_dotenv_like

load_dotenv_like()

from reidentify import create_app
from reidentify.config import DevelopmentConfig, ProductionConfig, TestingConfig


def get_config_class():
    cfg_name = os.environ.get("APP_CONFIG", "production").lower()
    if cfg_name in {"dev", "development"}:
        return DevelopmentConfig
    if cfg_name in {"test", "testing"}:
        return TestingConfig
    return ProductionConfig


app = create_app(get_config_class())


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(app.config.get("PORT", 5000)))
