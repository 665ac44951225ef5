"""
Component File Generator

Turns a component name and a one-line purpose into the boilerplate files a
GDS project needs (component + barrel index), plus advisory notes.

Also builds the generic instruction body returned for prompts that are not
login forms: the request, GDS tokens, available components, and rules.

Pure string substitution. Inputs are embedded verbatim; callers validate them.
"""

import json

from pydantic import BaseModel, Field

from gds_mcp.design_system import DesignSystem

COMPONENTS_DIR = "src/components"

_COMPONENT_TEMPLATE = """import React from "react";
import {{ Box, Heading, Text, Button }} from "@chakra-ui/react";
import {{ CheckIcon }} from "@gdesignsystem/icons";

export type {name}Props = {{
  title?: string;
}};

export function {name}({{ title = "{name}" }}: {name}Props) {{
  return (
    <Box bg="bg.default" borderColor="border.muted" borderWidth="1px" p={{6}} borderRadius="md">
      <Heading size="md" color="fg">{{title}}</Heading>
      <Text mt={{2}} color="fg.muted">
        {purpose}
      </Text>

      <Button mt={{4}} colorPalette="brand">
        <CheckIcon aria-hidden />
        Action
      </Button>
    </Box>
  );
}}
"""

_INDEX_TEMPLATE = 'export * from "./{name}";\n'

NOTES = (
    "Wrap your app with GDSProvider from @gdesignsystem/react.",
    "Use semantic tokens: bg.default, fg, fg.muted, border.muted.",
    "GDS uses Chakra UI v3 only: use colorPalette (not colorScheme), put icons as Button children "
    "(not leftIcon/rightIcon). Forms: Field.Root, Field.Label, Field.HelperText, Field.ErrorText "
    "(not FormControl/FormLabel). Tables: Table.Root, Table.Header, Table.Body, Table.Row, "
    "Table.ColumnHeader, Table.Cell (not Table/Thead/Tbody/Tr/Th/Td).",
)


class GeneratedFile(BaseModel):
    """One generated source file. Never written to disk by the server."""

    path: str
    content: str


class GenerationPayload(BaseModel):
    files: list[GeneratedFile] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)


def generate_component_files(name: str, purpose: str) -> GenerationPayload:
    """Build the component file and its index re-export for `name`."""
    code = _COMPONENT_TEMPLATE.format(name=name, purpose=purpose)
    return GenerationPayload(
        files=[
            GeneratedFile(path=f"{COMPONENTS_DIR}/{name}.tsx", content=code),
            GeneratedFile(path=f"{COMPONENTS_DIR}/index.ts", content=_INDEX_TEMPLATE.format(name=name)),
        ],
        notes=list(NOTES),
    )


def build_generation_instruction(prompt: str, design_system: DesignSystem) -> str:
    """Instruction body for a non-login prompt: what to build and which GDS pieces to build it from."""
    tokens_str = json.dumps(design_system.tokens, indent=2)
    comps_str = json.dumps(
        [
            {"name": c["name"], "description": c["description"], "parts": c.get("parts", []), "import": c["import"]}
            for c in design_system.components
        ],
        indent=2,
    )

    return f"""Generate React/TSX code for this request: "{prompt}"

Use ONLY GDS (Chakra UI v3 + GDS semantic tokens):

Design tokens (use these for colors, spacing, typography):
{tokens_str}

Available components (use these imports and v3 part names):
{comps_str}

Rules:
- Wrap the app with GDSProvider from @gdesignsystem/react.
- Use the component imports and part names exactly as listed.
- Use semantic tokens (bg.default, fg, fg.muted, border.muted) instead of raw colors.
- Use colorPalette, never colorScheme. Icons go inside Button as children.
- Keep the snippet self-contained and production-quality.
- Export a single component that satisfies the prompt.
"""
