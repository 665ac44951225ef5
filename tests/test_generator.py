"""Tests for component file generation and the generic instruction body."""

from __future__ import annotations

import pytest

from gds_mcp.design_system import DesignSystem
from gds_mcp.generator import NOTES, build_generation_instruction, generate_component_files


def test_generates_component_and_index() -> None:
    """Two files: the component itself and the barrel re-export."""
    payload = generate_component_files("Hero", "Landing banner")

    assert [f.path for f in payload.files] == ["src/components/Hero.tsx", "src/components/index.ts"]
    component, index = payload.files
    assert "export type HeroProps = {" in component.content
    assert "export function Hero({ title = \"Hero\" }: HeroProps) {" in component.content
    assert "Landing banner" in component.content
    assert index.content == 'export * from "./Hero";\n'


@pytest.mark.parametrize(
    ("name", "purpose"),
    [
        ("ProfileCard", "Shows the user's avatar and {name}"),
        ("Inbox", "Lists messages with <b>unread</b> badges"),
        ("Käyttäjä", "Näyttää käyttäjän tiedot"),
    ],
)
def test_inputs_are_embedded_verbatim(name: str, purpose: str) -> None:
    """No escaping: braces, markup and non-ASCII text pass through unchanged."""
    payload = generate_component_files(name, purpose)

    assert len(payload.files) == 2
    for generated in payload.files:
        assert name in generated.content
    assert purpose in payload.files[0].content


def test_notes_are_included() -> None:
    payload = generate_component_files("Hero", "Landing banner")
    assert payload.notes == list(NOTES)
    assert any("GDSProvider" in note for note in payload.notes)


def test_generation_is_deterministic() -> None:
    first = generate_component_files("Hero", "Landing banner")
    second = generate_component_files("Hero", "Landing banner")
    assert first.model_dump() == second.model_dump()


def test_instruction_lists_tokens_and_components(registry) -> None:
    """The generic instruction quotes the prompt and lists GDS pieces to build from."""
    design_system: DesignSystem = registry.design_system
    text = build_generation_instruction("An analytics dashboard", design_system)

    assert 'Generate React/TSX code for this request: "An analytics dashboard"' in text
    assert "bg.default" in text
    for name in design_system.component_names():
        assert f'"name": "{name}"' in text
    assert "colorPalette, never colorScheme" in text
