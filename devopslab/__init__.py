# devopslab/__init__.py
from .app import app as _app


def create_app():
    # wsgi.py falls back to this factory
    return _app
