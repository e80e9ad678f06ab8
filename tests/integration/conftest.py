"""
Fixtures for integration tests: a scriptable local HTTP server.

Routes:
    /echo           200 with the received request ID, method and JSON body
    /status/<code>  responds with <code> and {"error": "status <code>"}
    /flaky/<n>      503 for the first <n> hits, then 200 {"ok": true}
    /slow/<ms>      like /echo, after sleeping <ms> milliseconds
"""

import json
import threading
import time
from collections import Counter
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlparse

import pytest


class _ScriptedHandler(BaseHTTPRequestHandler):
    def do_GET(self):
        self._respond()

    do_POST = do_PUT = do_PATCH = do_DELETE = do_GET

    def _respond(self):
        path = urlparse(self.path).path
        length = int(self.headers.get("Content-Length") or 0)
        raw = self.rfile.read(length) if length else b""
        request_id = self.headers.get("x-request-id")
        self.server.received.append((self.command, path, request_id))

        parts = path.strip("/").split("/")
        if parts[0] == "status":
            code = int(parts[1])
            self._send(code, {"error": f"status {code}"})
        elif parts[0] == "flaky":
            with self.server.lock:
                self.server.hits[path] += 1
                hits = self.server.hits[path]
            if hits <= int(parts[1]):
                self._send(503, {"error": "unavailable"})
            else:
                self._send(200, {"ok": True})
        else:
            if parts[0] == "slow":
                time.sleep(int(parts[1]) / 1000)
            self._send(200, {
                "request_id": request_id,
                "method": self.command,
                "body": json.loads(raw) if raw else None,
            })

    def _send(self, status, payload):
        body = json.dumps(payload).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def http_server():
    """Run the scripted server on an ephemeral port for one test."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _ScriptedHandler)
    server.daemon_threads = True
    server.received = []
    server.hits = Counter()
    server.lock = threading.Lock()
    server.base_url = f"http://127.0.0.1:{server.server_address[1]}"

    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)
