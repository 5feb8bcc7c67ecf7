"""Page elements: the node types a card (or any container) is built from.

All elements are frozen pydantic models. Every ``with_*`` method returns a
modified copy; the receiver is never touched, so element trees can be
shared freely between renders and threads.

Each concrete element either names a Jinja2 template in
``rendering/templates/`` and supplies its values via ``template_values()``,
or overrides ``render()`` outright (Raw, Card).
"""
from enum import Enum
from typing import ClassVar

import markdown as _markdown_lib
from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field

from models.attributes import CoreAttributes
from models.context import PublishingContext
from rendering.html import RenderError, render_attributes, render_children, render_template


class FontStyle(str, Enum):
    TITLE1 = "title1"
    TITLE2 = "title2"
    TITLE3 = "title3"
    TITLE4 = "title4"
    TITLE5 = "title5"
    TITLE6 = "title6"
    BODY = "body"
    LEAD = "lead"

    @property
    def tag(self) -> str:
        if self in (FontStyle.BODY, FontStyle.LEAD):
            return "p"
        return f"h{self.value[-1]}"

    @property
    def is_prose(self) -> bool:
        """Running text rather than a heading."""
        return self in (FontStyle.BODY, FontStyle.LEAD)


def column_class(width: int | None) -> str:
    """Bootstrap column class for a column-width hint (None = automatic)."""
    if width is None:
        return "col"
    return f"col-md-{width}"


class Element(BaseModel):
    """Base for everything that can be placed on a page."""

    model_config = ConfigDict(frozen=True)

    template_name: ClassVar[str | None] = None

    attributes: CoreAttributes = Field(default_factory=CoreAttributes)
    # How many of the 12 grid columns to occupy inside a Section; None = automatic
    column_width: int | None = None

    # -- non-destructive modifiers ------------------------------------------

    def with_class(self, *names):
        return self.model_copy(update={"attributes": self.attributes.append_classes(*names)})

    def with_style_rule(self, *rules: str):
        return self.model_copy(update={"attributes": self.attributes.append_styles(*rules)})

    def with_id(self, element_id: str):
        return self.model_copy(update={"attributes": self.attributes.model_copy(update={"id": element_id})})

    def with_attribute(self, name: str, value: str):
        return self.model_copy(update={"attributes": self.attributes.with_custom(name, value)})

    def with_attributes(self, attributes: CoreAttributes):
        return self.model_copy(update={"attributes": self.attributes.merge(attributes)})

    def with_column_width(self, width: int | None):
        return self.model_copy(update={"column_width": width})

    def frame(self, width: str | None = None, height: str | None = None):
        """Attach explicit ``width`` / ``height`` inline styles; None leaves that axis alone."""
        rules = []
        if width is not None:
            rules.append(f"width: {width}")
        if height is not None:
            rules.append(f"height: {height}")
        return self.with_style_rule(*rules)

    # -- rendering ----------------------------------------------------------

    def template_values(self, context: PublishingContext) -> dict:
        return {}

    def rendered_attributes(self) -> CoreAttributes:
        return self.attributes

    def render(self, context: PublishingContext) -> Markup:
        if self.template_name is None:
            raise RenderError(f"{type(self).__name__} has no template and does not override render()")
        return render_template(
            self.template_name,
            attributes=render_attributes(self.rendered_attributes()),
            **self.template_values(context),
        )


class Text(Element):
    """A paragraph or heading. ``font`` picks the tag: title1–6 → h1–h6, body/lead → p."""

    template_name: ClassVar[str] = "text.html.j2"

    content: str
    font: FontStyle = FontStyle.BODY
    # Set when ``content`` is already HTML (e.g. converted from Markdown)
    is_markup: bool = False

    @classmethod
    def markdown(cls, source: str, font: FontStyle = FontStyle.BODY) -> "Text":
        """Build a Text from inline Markdown. The surrounding <p> is stripped.

        Raises ValueError when the source produces anything other than a
        single paragraph (several paragraphs, headings, lists, ...), since
        that markup cannot sit inside the <p>/<h*> a Text renders. Use
        ``Raw.markdown`` for block content.
        """
        html = _markdown_lib.markdown(source, extensions=["extra"]).strip()
        if not html:
            return cls(content="", font=font, is_markup=True)
        if not (html.startswith("<p>") and html.endswith("</p>") and html.count("<p>") == 1):
            raise ValueError(f"Markdown is not a single inline paragraph: {source!r}")
        return cls(content=html[3:-4], font=font, is_markup=True)

    def rendered_attributes(self) -> CoreAttributes:
        if self.font is FontStyle.LEAD:
            return CoreAttributes(classes=("lead",)).merge(self.attributes)
        return self.attributes

    def template_values(self, context: PublishingContext) -> dict:
        content = Markup(self.content) if self.is_markup else self.content
        return {"tag": self.font.tag, "content": content}


class Link(Element):
    template_name: ClassVar[str] = "link.html.j2"

    content: str | Element
    target: str

    def template_values(self, context: PublishingContext) -> dict:
        if not self.target:
            raise RenderError("Link target must not be empty")
        if isinstance(self.content, Element):
            content = self.content.render(context)
        else:
            content = self.content
        return {"href": context.resolve(self.target), "content": content}


class Image(Element):
    template_name: ClassVar[str] = "image.html.j2"

    path: str
    # Empty for decorative images: screen readers skip alt=""
    description: str = ""

    @classmethod
    def decorative(cls, path: str) -> "Image":
        return cls(path=path, description="")

    def template_values(self, context: PublishingContext) -> dict:
        if not self.path:
            raise RenderError("Image path must not be empty")
        return {"src": context.resolve(self.path), "alt": self.description}


class Group(Element):
    """Wraps its items in a <div>; with no attributes it emits only the items."""

    template_name: ClassVar[str] = "group.html.j2"

    items: tuple[Element, ...] = ()

    def template_values(self, context: PublishingContext) -> dict:
        return {
            "wrap": not self.attributes.is_empty,
            "content": render_children(self.items, context),
        }


class Divider(Element):
    template_name: ClassVar[str] = "divider.html.j2"


class Raw(Element):
    """Pre-rendered HTML, emitted verbatim. Attributes are ignored."""

    html: str

    @classmethod
    def markdown(cls, source: str) -> "Raw":
        """Block Markdown (paragraphs, headings, lists) rendered as-is."""
        return cls(html=_markdown_lib.markdown(source, extensions=["extra"]).strip())

    def render(self, context: PublishingContext) -> Markup:
        return Markup(self.html)


class Section(Element):
    """A grid row; each item sits in its own column sized by ``column_width``."""

    template_name: ClassVar[str] = "section.html.j2"

    items: tuple[Element, ...] = ()
    # Fixed number of columns per row (row-cols-N); None lets items size themselves
    columns: int | None = None

    def rendered_attributes(self) -> CoreAttributes:
        base = CoreAttributes(classes=("row", "g-4"))
        if self.columns is not None:
            base = base.append_classes(f"row-cols-{self.columns}")
        return base.merge(self.attributes)

    def template_values(self, context: PublishingContext) -> dict:
        columns = [
            (column_class(item.column_width), item.render(context))
            for item in self.items
        ]
        return {"columns": columns}
