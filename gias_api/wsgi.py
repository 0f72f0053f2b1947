"""
WSGI compatibility layer.

Wraps the ASGI FastAPI application for deployment on WSGI servers
such as Gunicorn or Waitress. Prefer ASGI deployment when possible.
"""

from a2wsgi import ASGIMiddleware

from gias_api.main import app

application = ASGIMiddleware(app)
