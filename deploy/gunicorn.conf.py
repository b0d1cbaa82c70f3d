"""gunicorn configuration for the ReIDentify backend.

Run:
    gunicorn -c deploy/gunicorn.conf.py wsgi:app
"""

import multiprocessing
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '5000')}"

# The app is I/O bound (store calls), so a few threaded workers are enough.
workers = int(os.environ.get("WEB_CONCURRENCY", multiprocessing.cpu_count() + 1))
worker_class = "gthread"
threads = 4

timeout = 30

# Logs go to stdout/stderr (docker / journalctl)
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()
