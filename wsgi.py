# wsgi.py
import traceback
from importlib import import_module


def load_flask_app():
    try:
        mod = import_module("devopslab.app")
    except Exception as e:
        raise RuntimeError(
            f"could not load the devopslab app\n"
            f"[IMPORT ERR] devopslab.app:app -> {e}\n{traceback.format_exc()}"
        ) from e
    # Flask instances are callable, never call it here
    return getattr(mod, "app")


app = load_flask_app()

# some servers look for wsgi:application
application = app
