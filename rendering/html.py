"""Generic HTML renderer: turns element trees into markup via Jinja2.

Every element type names a template in ``rendering/templates/``; the
element prepares the template values and this module does the escaping,
attribute serialisation and template lookup. Errors raised here propagate
to the caller of ``render()`` unchanged.
"""
import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape
from markupsafe import Markup, escape

from models.attributes import CoreAttributes

logger = logging.getLogger(__name__)

# Templates ship inside the package so installed copies find them too
_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


class RenderError(ValueError):
    """An element cannot be turned into markup (missing template, empty src/href)."""


@lru_cache(maxsize=1)
def environment() -> Environment:
    """Return the shared Jinja2 environment (built once per process)."""
    logger.debug("Loading element templates from %s", _TEMPLATE_DIR)
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "j2"]),
    )


def render_template(template_name: str, **values) -> Markup:
    """Render one element template. Values that are not ``Markup`` get escaped."""
    try:
        template = environment().get_template(template_name)
    except TemplateNotFound as exc:
        raise RenderError(f"No template named '{template_name}'") from exc
    return Markup(template.render(**values))


def render_attributes(attributes: CoreAttributes) -> Markup:
    """Serialise an attribute bag as ` id="…" class="…" style="…" name="…"`.

    Order is fixed (id, class, style, then custom attributes by name) so
    output is deterministic.
    """
    parts: list[str] = []
    if attributes.id:
        parts.append(f' id="{escape(attributes.id)}"')
    if attributes.classes:
        parts.append(f' class="{escape(" ".join(attributes.classes))}"')
    if attributes.styles:
        parts.append(f' style="{escape("; ".join(attributes.styles))}"')
    for name, value in sorted(attributes.custom):
        parts.append(f' {escape(name)}="{escape(value)}"')
    return Markup("".join(parts))


def render_children(items: Iterable, context) -> Markup:
    """Render each element in order and concatenate the results."""
    return Markup("").join(item.render(context) for item in items)
