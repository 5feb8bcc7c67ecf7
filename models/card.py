"""Card: a group of information placed inside a gently rounded border.

A card has an optional image, a header, a body and a footer. Its look is
set through four independent axes:

  - style + role        → solid background / coloured border
  - content position    → image above, below, or behind the body
  - content alignment   → where overlay text sits (overlay positions only)
  - image opacity       → dims the image, e.g. to keep overlay text legible

Rendering composes these into a Group tree:

    <div class="card [text-bg-ROLE|border-ROLE]">
      [image]            unless position is "top"
      [card-header]      only if the header is non-empty
      card-body | card-img-overlay
      [image]            only if position is "top"
      [card-footer]      only if the footer is non-empty
    </div>

Body children are restyled by type: prose Text → card-text, heading Text →
card-title, Link → card-link, Image → card-img.
"""
import logging
from enum import Enum

from markupsafe import Markup

from models.context import PublishingContext
from models.elements import Element, Group, Image, Link, Text
from utils.builder import collect

logger = logging.getLogger(__name__)


class Role(str, Enum):
    """Semantic colour roles understood by the Bootstrap utility classes."""

    DEFAULT = "default"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    LIGHT = "light"
    DARK = "dark"


class CardStyle(str, Enum):
    DEFAULT = "default"
    SOLID = "solid"
    BORDERED = "bordered"


def style_classes(style: CardStyle, role: Role) -> str | None:
    """Class derived from the style/role pair, or None for the default style."""
    if style is CardStyle.SOLID:
        return f"text-bg-{role.value}"
    if style is CardStyle.BORDERED:
        return f"border-{role.value}"
    return None


class ContentPosition(str, Enum):
    """Where the card content sits relative to its image."""

    BOTTOM = "bottom"
    TOP = "top"
    OVERLAY = "overlay"
    OVERLAY_CENTER = "overlay-center"

    @property
    def is_overlay(self) -> bool:
        return self in (ContentPosition.OVERLAY, ContentPosition.OVERLAY_CENTER)

    @property
    def image_class(self) -> str:
        if self is ContentPosition.BOTTOM:
            return "card-img-bottom"
        if self is ContentPosition.TOP:
            return "card-img-top"
        return "card-img"

    @property
    def body_class(self) -> str:
        return "card-img-overlay" if self.is_overlay else "card-body"


class TextAlignment(str, Enum):
    START = "text-start"
    CENTER = "text-center"
    END = "text-end"


class VerticalAlignment(str, Enum):
    START = "align-content-start"
    CENTER = "align-content-center"
    END = "align-content-end"


class ContentAlignment(str, Enum):
    """Nine-way placement of overlay content: {top, center, bottom} × {leading, center, trailing}."""

    TOP_LEADING = "top-leading"
    TOP = "top"
    TOP_TRAILING = "top-trailing"
    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"
    BOTTOM_LEADING = "bottom-leading"
    BOTTOM = "bottom"
    BOTTOM_TRAILING = "bottom-trailing"

    @property
    def text_alignment(self) -> TextAlignment:
        return _TEXT_ALIGNMENT[self]

    @property
    def vertical_alignment(self) -> VerticalAlignment:
        return _VERTICAL_ALIGNMENT[self]


# Column of the 3×3 grid → horizontal text alignment
_TEXT_ALIGNMENT = {
    ContentAlignment.TOP_LEADING: TextAlignment.START,
    ContentAlignment.LEADING: TextAlignment.START,
    ContentAlignment.BOTTOM_LEADING: TextAlignment.START,
    ContentAlignment.TOP: TextAlignment.CENTER,
    ContentAlignment.CENTER: TextAlignment.CENTER,
    ContentAlignment.BOTTOM: TextAlignment.CENTER,
    ContentAlignment.TOP_TRAILING: TextAlignment.END,
    ContentAlignment.TRAILING: TextAlignment.END,
    ContentAlignment.BOTTOM_TRAILING: TextAlignment.END,
}

# Row of the 3×3 grid → vertical alignment
_VERTICAL_ALIGNMENT = {
    ContentAlignment.TOP_LEADING: VerticalAlignment.START,
    ContentAlignment.TOP: VerticalAlignment.START,
    ContentAlignment.TOP_TRAILING: VerticalAlignment.START,
    ContentAlignment.LEADING: VerticalAlignment.CENTER,
    ContentAlignment.CENTER: VerticalAlignment.CENTER,
    ContentAlignment.TRAILING: VerticalAlignment.CENTER,
    ContentAlignment.BOTTOM_LEADING: VerticalAlignment.END,
    ContentAlignment.BOTTOM: VerticalAlignment.END,
    ContentAlignment.BOTTOM_TRAILING: VerticalAlignment.END,
}

DEFAULT_POSITION = ContentPosition.BOTTOM
DEFAULT_ALIGNMENT = ContentAlignment.TOP_LEADING


class Card(Element):
    role: Role = Role.DEFAULT
    style: CardStyle = CardStyle.DEFAULT
    content_position: ContentPosition = DEFAULT_POSITION
    content_alignment: ContentAlignment = DEFAULT_ALIGNMENT
    # Not clamped: values outside [0, 1] are written to the style attribute as-is
    image_opacity: float = 1.0

    image: Image | None = None
    header: tuple[Element, ...] = ()
    items: tuple[Element, ...] = ()
    footer: tuple[Element, ...] = ()

    @classmethod
    def create(cls, body=(), header=(), footer=(), image_name: str | None = None) -> "Card":
        """Build a card from loosely-shaped content blocks (see ``utils.builder.collect``)."""
        return cls(
            image=Image.decorative(image_name) if image_name else None,
            header=collect(header),
            items=collect(body),
            footer=collect(footer),
        )

    @property
    def card_classes(self) -> str | None:
        return style_classes(self.style, self.role)

    # -- configuration ------------------------------------------------------

    def with_role(self, role: Role) -> "Card":
        """Set the colour role. A card still on the default style becomes solid."""
        update: dict = {"role": Role(role)}
        if self.style is CardStyle.DEFAULT:
            update["style"] = CardStyle.SOLID
        return self.model_copy(update=update)

    def with_style(self, style: CardStyle) -> "Card":
        return self.model_copy(update={"style": CardStyle(style)})

    def with_content_position(self, position: ContentPosition) -> "Card":
        return self.model_copy(update={"content_position": ContentPosition(position)})

    def with_content_alignment(self, alignment: ContentAlignment) -> "Card":
        return self.model_copy(update={"content_alignment": ContentAlignment(alignment)})

    def with_image_opacity(self, opacity: float) -> "Card":
        """Use values below 1.0 to progressively dim the image."""
        return self.model_copy(update={"image_opacity": float(opacity)})

    # -- composition --------------------------------------------------------

    def _body_classes(self) -> list[str]:
        classes = [self.content_position.body_class]
        if self.content_position is ContentPosition.OVERLAY_CENTER:
            classes += [TextAlignment.CENTER.value, VerticalAlignment.CENTER.value]
        elif self.content_position is ContentPosition.OVERLAY:
            if self.content_alignment is not DEFAULT_ALIGNMENT:
                classes += [
                    self.content_alignment.text_alignment.value,
                    self.content_alignment.vertical_alignment.value,
                ]
        return classes

    def _decorated_image(self) -> Image:
        image = self.image.with_class(self.content_position.image_class)
        if self.image_opacity != 1:
            image = image.with_style_rule(f"opacity: {self.image_opacity}")
        return image

    def _body(self) -> Group:
        body = Group(items=tuple(_restyle_body_item(item) for item in self.items))
        if self.content_position is ContentPosition.OVERLAY_CENTER:
            # Stretch over the whole image so centring is relative to it
            body = body.frame(width="100%", height="100%")
        return body.with_class(self._body_classes())

    def compose(self) -> Group:
        """Build the element tree for this card without rendering it."""
        segments: list[Element] = []
        image_on_top = self.content_position is ContentPosition.TOP

        if self.image is not None and not image_on_top:
            segments.append(self._decorated_image())

        if self.header:
            segments.append(Group(items=self.header).with_class("card-header"))

        segments.append(self._body())

        if self.image is not None and image_on_top:
            segments.append(self._decorated_image())

        if self.footer:
            segments.append(Group(items=self.footer).with_class("card-footer", "text-body-secondary"))

        return (
            Group(items=tuple(segments))
            .with_attributes(self.attributes)
            .with_class("card")
            .with_class(self.card_classes)
        )

    def render(self, context: PublishingContext) -> Markup:
        logger.debug(
            "Rendering card: style=%s role=%s position=%s alignment=%s image=%s",
            self.style.value,
            self.role.value,
            self.content_position.value,
            self.content_alignment.value,
            self.image.path if self.image else None,
        )
        return self.compose().render(context)


def _restyle_body_item(item: Element) -> Element:
    """Add the card-specific class for a body child; other element types pass through."""
    if isinstance(item, Text):
        return item.with_class("card-text" if item.font.is_prose else "card-title")
    if isinstance(item, Link):
        return item.with_class("card-link")
    if isinstance(item, Image):
        return item.with_class("card-img")
    return item
