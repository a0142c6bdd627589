"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 1 -b 0.0.0.0:8000 wsgi:app

Run a single worker: the sequence counter is not shared safely between
processes.
"""

from quiniela import create_app

app = create_app()
