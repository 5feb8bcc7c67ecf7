"""Tests for the CardConfig model and card YAML loader."""
import pytest
from pydantic import ValidationError

from models.card import Card, CardStyle, ContentAlignment, ContentPosition, Role
from models.card_config import CardConfig
from models.elements import Divider, FontStyle, Image, Link, Raw, Text


# ---------------------------------------------------------------------------
# load()
# ---------------------------------------------------------------------------

class TestLoad:
    def test_loads_fixture(self, fixtures_dir):
        config = CardConfig.load(fixtures_dir / "featured.yaml")
        assert config.image == "/images/photos/dishwasher.jpg"
        assert config.role is Role.PRIMARY
        assert config.style is CardStyle.BORDERED
        assert config.content_position is ContentPosition.OVERLAY
        assert config.content_alignment is ContentAlignment.BOTTOM_TRAILING
        assert config.image_opacity == 0.5
        assert [n.type for n in config.body] == ["text", "markdown", "link"]

    def test_minimal_uses_defaults(self, fixtures_dir):
        config = CardConfig.load(fixtures_dir / "minimal.yaml")
        assert config.role is None
        assert config.header == []

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CardConfig.load(tmp_path / "nonexistent.yaml")

    def test_empty_file_is_empty_card(self, tmp_path):
        (tmp_path / "empty.yaml").write_text("", encoding="utf-8")
        assert CardConfig.load(tmp_path / "empty.yaml").to_card() == Card()

    def test_unknown_position_rejected(self, fixtures_dir):
        with pytest.raises(ValidationError):
            CardConfig.load(fixtures_dir / "invalid.yaml")

    def test_malformed_yaml_raises_value_error(self, tmp_path):
        (tmp_path / "broken.yaml").write_text("body: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="invalid YAML"):
            CardConfig.load(tmp_path / "broken.yaml")

    def test_unknown_node_type_rejected(self):
        with pytest.raises(ValidationError):
            CardConfig.model_validate({"body": [{"type": "video", "src": "x.mp4"}]})


# ---------------------------------------------------------------------------
# to_card()
# ---------------------------------------------------------------------------

class TestToCard:
    def test_nodes_become_elements(self):
        config = CardConfig.model_validate({"body": [
            {"type": "text", "content": "T", "font": "title2"},
            {"type": "markdown", "content": "*m*"},
            {"type": "link", "content": "L", "target": "/l"},
            {"type": "image", "path": "/i.png", "description": "I"},
            {"type": "divider"},
            {"type": "raw", "html": "<br>"},
        ]})
        items = config.to_card().items
        assert items[0] == Text(content="T", font=FontStyle.TITLE2)
        assert items[1].is_markup
        assert items[2] == Link(content="L", target="/l")
        assert items[3] == Image(path="/i.png", description="I")
        assert items[4] == Divider()
        assert items[5] == Raw(html="<br>")

    def test_block_markdown_node_becomes_raw(self, context):
        config = CardConfig.model_validate({"body": [
            {"type": "markdown", "content": "first\n\nsecond", "block": True},
        ]})
        html = config.to_card().render(context)
        assert html == '<div class="card"><div class="card-body"><p>first</p>\n<p>second</p></div></div>'

    def test_multi_paragraph_inline_markdown_rejected(self):
        config = CardConfig.model_validate({"body": [
            {"type": "markdown", "content": "first\n\nsecond"},
        ]})
        with pytest.raises(ValueError):
            config.to_card()

    def test_explicit_style_survives_role(self):
        card = CardConfig(role=Role.SUCCESS, style=CardStyle.BORDERED).to_card()
        assert card.style is CardStyle.BORDERED
        assert card.role is Role.SUCCESS

    def test_role_alone_makes_card_solid(self):
        card = CardConfig(role=Role.DARK).to_card()
        assert card.style is CardStyle.SOLID

    def test_unset_axes_keep_defaults(self):
        card = CardConfig().to_card()
        assert card.content_position is ContentPosition.BOTTOM
        assert card.image_opacity == 1.0
        assert card.image is None

    def test_id_and_classes_on_card(self):
        card = CardConfig(id="c", classes=["shadow", "h-100"]).to_card()
        assert card.attributes.id == "c"
        assert card.attributes.classes == ("shadow", "h-100")

    def test_featured_fixture_renders(self, fixtures_dir, context):
        html = CardConfig.load(fixtures_dir / "featured.yaml").to_card().render(context)
        assert html == (
            '<div id="featured" class="shadow-sm card border-primary">'
            '<img src="/images/photos/dishwasher.jpg" alt="" class="card-img" style="opacity: 0.5">'
            '<div class="card-header"><h6>Featured</h6></div>'
            '<div class="card-img-overlay text-end align-content-end">'
            '<h3 class="card-title">Before you wash up</h3>'
            '<p class="card-text">Use <em>hot</em> water.</p>'
            '<a href="/story" class="card-link">Read more</a>'
            "</div>"
            '<div class="card-footer text-body-secondary"><p>Updated today</p></div>'
            "</div>"
        )
