"""
Tool answers shared by tools/call and the GET /mcp/* mirrors.

Each builder returns the exact text a client sees, so a GET mirror and the
matching tools/call never drift apart. Argument models validate tools/call
input the same way for every tool.
"""

import json

from pydantic import BaseModel, ValidationError, field_validator

from gds_mcp.classifier import PromptIntent, classify
from gds_mcp.design_system import DesignSystem
from gds_mcp.generator import GenerationPayload, build_generation_instruction
from gds_mcp.guide import guide_text, login_card_snippet, with_header
from gds_mcp.jsonrpc import RpcError


class _ToolArguments(BaseModel):
    @field_validator("*")
    @classmethod
    def _not_blank(cls, value):
        if isinstance(value, str) and not value.strip():
            raise ValueError("must not be empty")
        return value


class GenerateComponentArgs(_ToolArguments):
    name: str
    purpose: str


class GenerateUiArgs(_ToolArguments):
    prompt: str


def parse_arguments(model: type[BaseModel], arguments: dict) -> BaseModel:
    """Validate tool arguments; the first failing field is named in the error."""
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        loc = e.errors()[0].get("loc") or ("arguments",)
        raise RpcError.invalid_argument(str(loc[0])) from e


# ────────────── Answers ──────────────

def guide_answer() -> str:
    return guide_text()


def login_card_answer() -> str:
    return with_header(login_card_snippet())


def component_answer(payload: GenerationPayload) -> str:
    return with_header(json.dumps(payload.model_dump(), indent=2))


def generate_ui_answer(prompt: str, design_system: DesignSystem) -> str:
    """Login prompts get the LoginCard; everything else gets the generation instruction."""
    if classify(prompt) is PromptIntent.LOGIN:
        return login_card_answer()
    return with_header(build_generation_instruction(prompt, design_system))


def tokens_answer(design_system: DesignSystem) -> str:
    return with_header(json.dumps(design_system.tokens, indent=2))


def components_answer(design_system: DesignSystem) -> str:
    return with_header(json.dumps(design_system.catalog, indent=2))
