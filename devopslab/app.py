# app.py
import sys
import logging

from flask import Flask, jsonify
from werkzeug.serving import make_server

HOST = "0.0.0.0"
PORT = 3000

GREETING = "Hello from the DevOps-Lab Node.js App!"
STATUS_PAYLOAD = {"status": "running", "message": "API is healthy"}

# stdout so the startup line shows up in container logs
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)

app = Flask(__name__)


@app.get("/")
def home():
    return GREETING, 200, {"Content-Type": "text/plain; charset=utf-8"}


@app.get("/api/status")
def api_status():
    return jsonify(dict(STATUS_PAYLOAD)), 200


# 500 handler, Flask has already logged the exception
@app.errorhandler(500)
def handle_500(e):
    return "Internal Server Error", 500, {"Content-Type": "text/plain; charset=utf-8"}


def main():
    # bind first so the log line is only written once the port is open
    server = make_server(HOST, PORT, app, threaded=True)
    logger.info(f"App listening at http://localhost:{PORT}")
    server.serve_forever()


if __name__ == "__main__":
    main()
