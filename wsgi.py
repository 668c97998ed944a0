"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 2 --threads 4 -b 0.0.0.0:3000 wsgi:app
"""

from lottery_api import create_app

app = create_app()
