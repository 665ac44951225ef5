"""
Tool and resource registries.

Built once at startup by build_registry() and handed to the Dispatcher.
Nothing mutates them afterwards, so worker threads share one instance.
"""

import json
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from mcp import types

from gds_mcp.design_system import DesignSystem, load_design_system
from gds_mcp.guide import guide_text, login_card_snippet


class ToolName(str, Enum):
    GENERATE_COMPONENT = "gds_generate_component"
    CHAKRA_V3_GUIDE = "gds_chakra_v3_guide"
    SNIPPET_LOGIN_CARD = "gds_snippet_login_card"
    GENERATE_UI = "gds_generate_ui"
    DESIGN_TOKENS = "gds_design_tokens"
    LIST_COMPONENTS = "gds_list_components"

    @classmethod
    def parse(cls, value):
        """Map a raw tool name to a member, or None when it is not one of ours."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


_NO_ARGUMENTS = {"type": "object", "properties": {}, "additionalProperties": False}

TOOLS = (
    types.Tool(
        name=ToolName.GENERATE_COMPONENT.value,
        description=(
            "Generates a React (TS) component using Chakra UI v3 + GDS. Use for ANY GDS UI: dashboard, inbox, "
            "content page, card, layout, list, table, etc. For login/sign-in forms use gds_snippet_login_card "
            "instead. Before generating ANY GDS code in this chat, call gds_chakra_v3_guide first if you have "
            "not yet; then use ONLY v3 names (Separator not Divider, Field.Root not FormControl, Card.Root not "
            "Card, etc.). Returns files[] and v3 reference."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Component name, e.g. LoginCard"},
                "purpose": {"type": "string", "description": "What the component does"},
            },
            "required": ["name", "purpose"],
            "additionalProperties": False,
        },
    ),
    types.Tool(
        name=ToolName.CHAKRA_V3_GUIDE.value,
        description=(
            "Call this FIRST whenever the user asks for ANY UI with GDS: dashboard, inbox, content page, form, "
            "card, layout, settings, list, table, modal, etc. Returns Chakra v3 renames (Divider→Separator, "
            "FormControl→Field.Root, Card→Card.Root, Checkbox→Checkbox.Root, InputRightElement→InputGroup "
            "endElement, colorScheme→colorPalette, Table→Table.Root, Modal→Dialog.*). Use ONLY these names when "
            "generating code. Prevents 'doesn't provide an export named X' errors."
        ),
        inputSchema=_NO_ARGUMENTS,
    ),
    types.Tool(
        name=ToolName.SNIPPET_LOGIN_CARD.value,
        description=(
            "Returns a production-ready LoginCard in Chakra v3 only. Use when the user asks for a login form, "
            "sign-in card, or email+password form with GDS. For any other GDS UI (dashboard, inbox, content "
            "page, etc.) call gds_chakra_v3_guide first then generate code using only v3 names."
        ),
        inputSchema=_NO_ARGUMENTS,
    ),
    types.Tool(
        name=ToolName.GENERATE_UI.value,
        description=(
            "Turns a natural-language UI request into GDS guidance. Sign-in requests (English or Finnish) get "
            "the LoginCard snippet; anything else gets an instruction listing GDS tokens, components and rules "
            "to generate the code from."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "prompt": {
                    "type": "string",
                    "description": "What to build, e.g. A settings page with a profile form",
                },
            },
            "required": ["prompt"],
            "additionalProperties": False,
        },
    ),
    types.Tool(
        name=ToolName.DESIGN_TOKENS.value,
        description=(
            "Get GDS semantic tokens (bg.*, fg.*, border.*), color palettes, spacing, radii and typography. "
            "Use these names in generated code instead of raw values."
        ),
        inputSchema=_NO_ARGUMENTS,
    ),
    types.Tool(
        name=ToolName.LIST_COMPONENTS.value,
        description=(
            "List GDS components with their Chakra v3 part names, props and import paths. Use this to choose "
            "which components to use for a prompt."
        ),
        inputSchema=_NO_ARGUMENTS,
    ),
)

GUIDE_URI = "gds://guide/chakra-v3"
LOGIN_CARD_URI = "gds://snippets/login-card"
TOKENS_URI = "gds://design-system/tokens"
COMPONENTS_URI = "gds://design-system/components"

RESOURCES = (
    types.Resource(
        uri=GUIDE_URI,
        name="chakra-v3-guide",
        description="Chakra UI v3 renames every GDS answer relies on (Divider→Separator, FormControl→Field.Root, ...).",
        mimeType="text/markdown",
    ),
    types.Resource(
        uri=LOGIN_CARD_URI,
        name="login-card",
        description="Reference LoginCard implementation in Chakra v3 (TSX).",
        mimeType="text/plain",
    ),
    types.Resource(
        uri=TOKENS_URI,
        name="design-tokens",
        description="GDS semantic tokens, palettes, spacing, radii and typography.",
        mimeType="application/json",
    ),
    types.Resource(
        uri=COMPONENTS_URI,
        name="components",
        description="GDS component catalog with v3 part names, props and import paths.",
        mimeType="application/json",
    ),
)


@dataclass(frozen=True)
class Registry:
    tools: tuple
    resources: tuple
    resource_texts: Mapping[str, str]
    design_system: DesignSystem

    def read(self, uri: str):
        """Return (descriptor, text) for a known uri, else None."""
        for resource in self.resources:
            if str(resource.uri) == uri:
                return resource, self.resource_texts[uri]
        return None


def descriptor(model) -> dict:
    """Wire form of an SDK model, with camelCase keys (mimeType, inputSchema)."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def _check_unique(values, kind: str) -> None:
    seen = set()
    for value in values:
        if value in seen:
            raise ValueError(f"Duplicate {kind}: {value}")
        seen.add(value)


def build_registry(design_system: DesignSystem | None = None) -> Registry:
    """Assemble the process-wide registry. Reads design-system JSON if not given."""
    if design_system is None:
        design_system = load_design_system()

    _check_unique([tool.name for tool in TOOLS], "tool name")
    uris = [str(resource.uri) for resource in RESOURCES]
    _check_unique(uris, "resource uri")

    contents = {
        GUIDE_URI: guide_text(),
        LOGIN_CARD_URI: login_card_snippet(),
        TOKENS_URI: json.dumps(design_system.tokens, indent=2),
        COMPONENTS_URI: json.dumps(design_system.catalog, indent=2),
    }
    if set(contents) != set(uris):
        raise ValueError(f"Resource texts do not match descriptors: {sorted(set(contents) ^ set(uris))}")
    texts = {uri: contents[uri] for uri in uris}
    return Registry(
        tools=TOOLS,
        resources=RESOURCES,
        resource_texts=MappingProxyType(texts),
        design_system=design_system,
    )
