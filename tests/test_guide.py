"""Tests for the Chakra v3 template library."""

from __future__ import annotations

from gds_mcp.guide import CHAKRA_V3_GUIDE, GUIDE_TITLE, guide_text, login_card_snippet, with_header


def test_with_header_prepends_guide() -> None:
    """The v3 rules come first, the body last and unchanged."""
    body = "export function Demo() {}"
    text = with_header(body)

    assert text.startswith("--- GDS: Chakra UI v3 only")
    assert text.endswith(body)
    assert CHAKRA_V3_GUIDE.strip() in text


def test_guide_text_has_title_and_rules() -> None:
    text = guide_text()
    assert text.startswith(GUIDE_TITLE)
    assert "Do NOT use: Divider → use Separator" in text
    assert "colorPalette" in text


def test_login_snippet_uses_v3_names_only() -> None:
    """The reference LoginCard must not use any name the guide deprecates."""
    snippet = login_card_snippet()

    assert "export function LoginCard()" in snippet
    for v3_name in ("Card.Root", "Field.Root", "Checkbox.Root", "Separator", "endElement", "colorPalette"):
        assert v3_name in snippet
    for deprecated in ("FormControl", "Divider", "InputRightElement", "colorScheme", "CardBody"):
        assert deprecated not in snippet


def test_login_snippet_is_constant() -> None:
    assert login_card_snippet() == login_card_snippet()
