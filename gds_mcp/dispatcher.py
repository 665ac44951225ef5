"""
JSON-RPC dispatcher for POST /mcp.

Checks the Accept header, validates the envelope, routes by method (and by
tool name for tools/call) and always answers with exactly one envelope.
Handlers raise RpcError for anything the client got wrong; any other exception
is logged and reported as an internal error.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from mcp import types

from gds_mcp.config import Settings
from gds_mcp.generator import generate_component_files
from gds_mcp.jsonrpc import ErrorCodes, RpcError, error_response, is_valid_id, success_response
from gds_mcp.registry import Registry, ToolName, descriptor
from gds_mcp.tools import (
    GenerateComponentArgs,
    GenerateUiArgs,
    component_answer,
    components_answer,
    generate_ui_answer,
    guide_answer,
    login_card_answer,
    parse_arguments,
    tokens_answer,
)

logger = logging.getLogger(__name__)

SERVER_NAME = "gds-mcp-server"
SERVER_VERSION = "0.2.0"

INSTRUCTIONS = (
    "GDS is built on Chakra UI v3. Call gds_chakra_v3_guide before writing any GDS code, "
    "use gds_snippet_login_card for sign-in forms and gds_generate_component for everything else."
)

REQUIRED_ACCEPT_TYPES = ("application/json", "text/event-stream")

MethodHandler = Callable[[Any], dict]


@dataclass(frozen=True)
class DispatchResult:
    """HTTP status plus the JSON-RPC envelope to send."""

    status: int
    body: dict


def _text_result(text: str, structured: dict | None = None) -> dict:
    result = types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        structuredContent=structured,
    )
    return descriptor(result)


def _header(headers: Mapping[str, str] | None, name: str) -> str:
    if not headers:
        return ""
    for key, value in headers.items():
        if key.lower() == name:
            return value or ""
    return ""


class Dispatcher:
    """Routes JSON-RPC requests to their handlers.

    Usage:
        dispatcher = Dispatcher(build_registry(), Settings.from_env())
        result = dispatcher.dispatch({"jsonrpc": "2.0", "id": 1, "method": "ping"}, headers)
    """

    def __init__(self, registry: Registry, settings: Settings | None = None) -> None:
        self.registry = registry
        self.settings = settings or Settings()

        self._methods: dict[str, MethodHandler] = {
            "initialize": self.initialize,
            "tools/list": self.list_tools,
            "tools/call": self.call_tool,
            "ping": self.ping,
        }
        if self.settings.enable_resources:
            self._methods["resources/list"] = self.list_resources
            self._methods["resources/read"] = self.read_resource

        self._tools: dict[ToolName, MethodHandler] = {
            ToolName.GENERATE_COMPONENT: self._generate_component,
            ToolName.CHAKRA_V3_GUIDE: self._chakra_v3_guide,
            ToolName.SNIPPET_LOGIN_CARD: self._snippet_login_card,
            ToolName.GENERATE_UI: self._generate_ui,
            ToolName.DESIGN_TOKENS: self._design_tokens,
            ToolName.LIST_COMPONENTS: self._list_components,
        }
        missing = set(ToolName) - set(self._tools)
        if missing:
            raise RuntimeError(f"No handler for tools: {sorted(t.value for t in missing)}")

    @property
    def methods(self) -> list[str]:
        return list(self._methods)

    # ────────────── Entry points ──────────────

    def dispatch(self, envelope: Any, headers: Mapping[str, str] | None = None) -> DispatchResult:
        """Answer an already-parsed request body."""
        rejection = self._check_accept(headers)
        if rejection is not None:
            return rejection
        return self._route(envelope)

    def handle_http(self, raw_body: bytes, headers: Mapping[str, str] | None = None) -> DispatchResult:
        """Answer a raw POST body: Accept gate, JSON decoding, then routing."""
        rejection = self._check_accept(headers)
        if rejection is not None:
            return rejection
        try:
            envelope = json.loads(raw_body) if raw_body else {}
        except ValueError as e:
            logger.info("[dispatch] Unparseable body: %s", e)
            return DispatchResult(200, error_response(None, ErrorCodes.PARSE_ERROR, "Parse error: body is not valid JSON"))
        return self._route(envelope)

    def _check_accept(self, headers) -> DispatchResult | None:
        if not self.settings.enforce_accept:
            return None
        accept = _header(headers, "accept").strip().lower()
        if not accept:
            return None
        if all(media_type in accept for media_type in REQUIRED_ACCEPT_TYPES):
            return None
        logger.warning("[dispatch] Rejected Accept header: %s", accept)
        error = RpcError.not_acceptable()
        return DispatchResult(error.status, error_response(None, error.code, error.message))

    def _route(self, envelope: Any) -> DispatchResult:
        if not isinstance(envelope, dict):
            return self._invalid_request("request must be a JSON object")
        request_id = envelope.get("id")
        if not is_valid_id(request_id):
            return self._invalid_request("id must be a string, an integer or null")
        method = envelope.get("method")
        if not isinstance(method, str):
            return self._invalid_request("method must be a string")

        params = envelope.get("params")
        if params is None:
            params = {}

        logger.debug("[dispatch] %s id=%r", method, request_id)
        try:
            handler = self._methods.get(method)
            if handler is None:
                raise RpcError.method_not_supported(method)
            result = handler(params)
        except RpcError as e:
            logger.info("[dispatch] %s -> %d %s", method, e.code, e.message)
            return DispatchResult(e.status, error_response(request_id, e.code, e.message))
        except Exception:
            logger.exception("[dispatch] %s failed", method)
            return DispatchResult(200, error_response(request_id, ErrorCodes.INTERNAL_ERROR, "Internal error"))
        return DispatchResult(200, success_response(request_id, result))

    def _invalid_request(self, reason: str) -> DispatchResult:
        logger.info("[dispatch] Invalid request: %s", reason)
        return DispatchResult(200, error_response(None, ErrorCodes.INVALID_REQUEST, f"Invalid Request: {reason}"))

    # ────────────── Methods ──────────────

    def initialize(self, params: Any = None) -> dict:
        version = params.get("protocolVersion") if isinstance(params, dict) else None
        if not isinstance(version, str) or not version:
            version = self.settings.protocol_version

        capabilities = types.ServerCapabilities(
            tools=types.ToolsCapability(),
            resources=types.ResourcesCapability() if self.settings.enable_resources else None,
        )
        result = types.InitializeResult(
            protocolVersion=version,
            capabilities=capabilities,
            serverInfo=types.Implementation(name=SERVER_NAME, version=SERVER_VERSION),
            instructions=INSTRUCTIONS,
        )
        return descriptor(result)

    def list_tools(self, params: Any = None) -> dict:
        return descriptor(types.ListToolsResult(tools=list(self.registry.tools)))

    def list_resources(self, params: Any = None) -> dict:
        return descriptor(types.ListResourcesResult(resources=list(self.registry.resources)))

    def read_resource(self, params: Any) -> dict:
        uri = params.get("uri") if isinstance(params, dict) else None
        if not isinstance(uri, str) or not uri.strip():
            raise RpcError.invalid_argument("uri")

        found = self.registry.read(uri)
        if found is None:
            raise RpcError.unknown_resource(uri)
        resource, text = found
        wire = descriptor(resource)
        contents = types.TextResourceContents(uri=wire["uri"], mimeType=wire.get("mimeType"), text=text)
        return descriptor(types.ReadResourceResult(contents=[contents]))

    def call_tool(self, params: Any) -> dict:
        if not isinstance(params, dict):
            raise RpcError.invalid_argument("name")
        raw_name = params.get("name")
        if not isinstance(raw_name, str) or not raw_name.strip():
            raise RpcError.invalid_argument("name")

        tool = ToolName.parse(raw_name)
        if tool is None:
            raise RpcError.unknown_tool(raw_name)

        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise RpcError.invalid_argument("arguments")

        logger.info("[dispatch] tools/call %s", tool.value)
        return self._tools[tool](arguments)

    def ping(self, params: Any = None) -> dict:
        return {}

    # ────────────── Tools ──────────────

    def _generate_component(self, arguments: dict) -> dict:
        args = parse_arguments(GenerateComponentArgs, arguments)
        payload = generate_component_files(args.name, args.purpose)
        return _text_result(component_answer(payload), structured=payload.model_dump())

    def _chakra_v3_guide(self, arguments: dict) -> dict:
        return _text_result(guide_answer())

    def _snippet_login_card(self, arguments: dict) -> dict:
        return _text_result(login_card_answer())

    def _generate_ui(self, arguments: dict) -> dict:
        args = parse_arguments(GenerateUiArgs, arguments)
        return _text_result(generate_ui_answer(args.prompt, self.registry.design_system))

    def _design_tokens(self, arguments: dict) -> dict:
        return _text_result(tokens_answer(self.registry.design_system))

    def _list_components(self, arguments: dict) -> dict:
        return _text_result(components_answer(self.registry.design_system))

    # ────────────── Introspection (GET /mcp) ──────────────

    def describe(self) -> dict:
        info = {
            "name": SERVER_NAME,
            "version": SERVER_VERSION,
            "protocolVersion": self.settings.protocol_version,
            "transport": "POST /mcp with a JSON-RPC 2.0 body",
            "methods": self.methods,
            "tools": [tool.name for tool in self.registry.tools],
            "components": self.registry.design_system.component_names(),
        }
        if self.settings.enable_resources:
            info["resources"] = [str(resource.uri) for resource in self.registry.resources]
        return info
