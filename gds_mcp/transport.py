"""
HTTP transport: health checks, GET convenience mirrors, and POST /mcp.

The handler only parses requests and writes responses; every answer comes
from the Dispatcher or the shared tool answers in gds_mcp.tools.
"""

import json
import logging
import urllib.parse
from http.server import BaseHTTPRequestHandler, HTTPServer
from socketserver import ThreadingMixIn

from gds_mcp.config import Settings
from gds_mcp.dispatcher import Dispatcher
from gds_mcp.jsonrpc import ErrorCodes, error_response
from gds_mcp.registry import build_registry
from gds_mcp.tools import generate_ui_answer, guide_answer, login_card_answer

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "A simple login form with email and password."

MAX_BODY_BYTES = 2 * 1024 * 1024

ROUTES = [
    "GET /health",
    "GET /mcp",
    "GET /mcp/guide",
    "GET /mcp/tools",
    "GET /mcp/snippet/login",
    "GET /mcp/generate?prompt=...",
    "GET /mcp/tokens",
    "GET /mcp/components",
    "GET /mcp/platform",
    "POST /mcp",
]


class ThreadedHTTPServer(ThreadingMixIn, HTTPServer):
    daemon_threads = True

    def __init__(self, address, handler_class, dispatcher: Dispatcher):
        self.dispatcher = dispatcher
        super().__init__(address, handler_class)


class Handler(BaseHTTPRequestHandler):
    server_version = "gds-mcp-server"

    @property
    def dispatcher(self) -> Dispatcher:
        return self.server.dispatcher

    def do_OPTIONS(self):
        self.send_response(204)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "GET, POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type, Accept, Mcp-Session-Id")
        self.send_header("Content-Length", "0")
        self.end_headers()

    def do_GET(self):
        parsed = urllib.parse.urlparse(self.path)
        path = parsed.path.rstrip("/") or "/"
        try:
            self._route_get(path, parsed.query)
        except Exception:
            logger.exception("[http] GET %s failed", path)
            self.send_json(error_response(None, ErrorCodes.INTERNAL_ERROR, "Internal error"), 500)

    def _route_get(self, path, query):
        design_system = self.dispatcher.registry.design_system

        if path in ("/", "/health"):
            self.send_text("ok")
            return

        if path == "/mcp":
            info = self.dispatcher.describe()
            info["routes"] = ROUTES
            self.send_json(info)
            return

        if path == "/mcp/guide":
            self.send_text(guide_answer())
            return

        if path == "/mcp/tools":
            self.send_json(self.dispatcher.list_tools())
            return

        if path == "/mcp/snippet/login":
            self.send_text(login_card_answer())
            return

        if path == "/mcp/generate":
            qs = urllib.parse.parse_qs(query)
            prompt = qs.get("prompt", [""])[0].strip() or DEFAULT_PROMPT
            self.send_text(generate_ui_answer(prompt, design_system))
            return

        if path == "/mcp/tokens":
            self.send_json(design_system.tokens)
            return

        if path == "/mcp/components":
            self.send_json(design_system.catalog)
            return

        if path == "/mcp/platform":
            self.send_json(design_system.platform)
            return

        self.send_error(404)

    def do_POST(self):
        path = urllib.parse.urlparse(self.path).path.rstrip("/") or "/"
        if path != "/mcp":
            self.send_error(404)
            return

        length = self._content_length()
        if length is None:
            return

        try:
            body = self.rfile.read(length) if length else b""
            result = self.dispatcher.handle_http(body, self.headers)
        except Exception:
            logger.exception("[http] POST /mcp failed")
            self.send_json(error_response(None, ErrorCodes.INTERNAL_ERROR, "Internal error"), 500)
            return
        self.send_json(result.body, result.status)

    def _content_length(self):
        """Validated Content-Length, or None after answering 400 or 413."""
        raw = self.headers.get("Content-Length") or "0"
        try:
            length = int(raw)
        except ValueError:
            length = -1
        if length < 0:
            logger.warning("[http] Bad Content-Length: %r", raw)
            self.close_connection = True
            self.send_json(error_response(None, ErrorCodes.INVALID_REQUEST, "Invalid Content-Length"), 400)
            return None
        if length > MAX_BODY_BYTES:
            logger.warning("[http] Body too large: %d bytes", length)
            self.close_connection = True
            self.send_json(error_response(None, ErrorCodes.INVALID_REQUEST, "Request body too large"), 413)
            return None
        return length

    # ────────────── Writers ──────────────

    def send_text(self, text, status=200):
        data = text.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(data)))
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(data)

    def send_json(self, obj, status=200):
        data = json.dumps(obj).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(data)))
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(data)

    def log_message(self, fmt, *args):
        logger.info("[http] " + fmt, *args)


def create_server(settings: Settings, dispatcher: Dispatcher | None = None) -> ThreadedHTTPServer:
    """Build the registry and dispatcher (unless given) and bind the HTTP server."""
    if dispatcher is None:
        dispatcher = Dispatcher(build_registry(), settings)
    return ThreadedHTTPServer((settings.host, settings.port), Handler, dispatcher)
