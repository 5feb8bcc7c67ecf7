"""Card description file: typed representation of a card YAML file.

Example::

    image: /images/photos/dishwasher.jpg
    role: primary
    style: bordered
    content_position: overlay
    content_alignment: bottom-trailing
    image_opacity: 0.5
    header:
      - {type: text, content: "Featured", font: title6}
    body:
      - {type: text, content: "Before you wash up", font: title3}
      - {type: markdown, content: "Use *hot* water."}
      - {type: link, content: "Read more", target: /story}
    footer:
      - {type: text, content: "Updated today"}

Every field is optional; a missing key leaves the card default in place.
"""
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from models.card import Card, CardStyle, ContentAlignment, ContentPosition, Role
from models.elements import Divider, Element, FontStyle, Image, Link, Raw, Text


class TextNode(BaseModel):
    type: Literal["text"]
    content: str
    font: FontStyle = FontStyle.BODY

    def to_element(self) -> Element:
        return Text(content=self.content, font=self.font)


class MarkdownNode(BaseModel):
    type: Literal["markdown"]
    content: str
    font: FontStyle = FontStyle.BODY
    # Multi-paragraph content; emitted verbatim and not restyled inside a card body
    block: bool = False

    def to_element(self) -> Element:
        if self.block:
            return Raw.markdown(self.content)
        return Text.markdown(self.content, font=self.font)


class LinkNode(BaseModel):
    type: Literal["link"]
    content: str
    target: str

    def to_element(self) -> Element:
        return Link(content=self.content, target=self.target)


class ImageNode(BaseModel):
    type: Literal["image"]
    path: str
    description: str = ""

    def to_element(self) -> Element:
        return Image(path=self.path, description=self.description)


class DividerNode(BaseModel):
    type: Literal["divider"]

    def to_element(self) -> Element:
        return Divider()


class RawNode(BaseModel):
    type: Literal["raw"]
    html: str

    def to_element(self) -> Element:
        return Raw(html=self.html)


NodeConfig = Annotated[
    TextNode | MarkdownNode | LinkNode | ImageNode | DividerNode | RawNode,
    Field(discriminator="type"),
]


class CardConfig(BaseModel):
    image: str | None = None
    role: Role | None = None
    style: CardStyle | None = None
    content_position: ContentPosition | None = None
    content_alignment: ContentAlignment | None = None
    image_opacity: float | None = None
    id: str | None = None
    classes: list[str] = Field(default_factory=list)

    header: list[NodeConfig] = Field(default_factory=list)
    body: list[NodeConfig] = Field(default_factory=list)
    footer: list[NodeConfig] = Field(default_factory=list)

    @classmethod
    def load(cls, path: Path) -> "CardConfig":
        """Load from a YAML file.

        Raises FileNotFoundError if path does not exist, ValueError if the
        file is not valid YAML or does not describe a card.
        """
        import yaml  # lazy, only needed at load time
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"{path}: invalid YAML: {exc}") from exc
        return cls.model_validate(data)

    def to_card(self) -> Card:
        """Build the Card, applying each configured axis through its ``with_*`` method.

        The role goes first so that an explicit ``style`` overrides the
        solid style a role assignment implies.
        """
        card = Card.create(
            body=[n.to_element() for n in self.body],
            header=[n.to_element() for n in self.header],
            footer=[n.to_element() for n in self.footer],
            image_name=self.image,
        )
        if self.role is not None:
            card = card.with_role(self.role)
        if self.style is not None:
            card = card.with_style(self.style)
        if self.content_position is not None:
            card = card.with_content_position(self.content_position)
        if self.content_alignment is not None:
            card = card.with_content_alignment(self.content_alignment)
        if self.image_opacity is not None:
            card = card.with_image_opacity(self.image_opacity)
        if self.id:
            card = card.with_id(self.id)
        if self.classes:
            card = card.with_class(self.classes)
        return card
