#!/usr/bin/env python3
"""Render a card description (YAML) to an HTML fragment.

Usage:
    python render_card.py cards/featured.yaml                  # → output/featured.html
    python render_card.py cards/featured.yaml -o featured.html
    python render_card.py cards/featured.yaml --site-url /blog
"""
import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from settings import Settings
from models.card_config import CardConfig
from models.context import PublishingContext

logger = logging.getLogger("render_card")


def _output_path(settings: Settings, card_path: Path) -> Path:
    """Default output location: ``<output_dir>/<card file stem>.html``."""
    return settings.output_dir / f"{card_path.stem}.html"


def render(card_path: Path, settings: Settings, output: Path | None = None) -> Path:
    """Load ``card_path``, render it and write the HTML. Returns the written path."""
    config = CardConfig.load(card_path)
    card = config.to_card()
    html = card.render(PublishingContext.from_settings(settings))

    output_path = output or _output_path(settings, card_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html + "\n", encoding="utf-8")
    logger.info("Rendered %s → %s", card_path, output_path)
    return output_path


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("card", type=Path, help="Card description file (YAML)")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Write HTML here instead of <output_dir>/<name>.html")
    parser.add_argument("--site-url", dest="site_url", default=None,
                        help="Base URL used to resolve root-relative links and images")
    args = parser.parse_args(argv)

    overrides = {"site_url": args.site_url} if args.site_url else {}
    settings = Settings(**overrides)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        render(args.card, settings, args.output)
    except FileNotFoundError:
        logger.error("Card file not found: %s", args.card)
        return 1
    except ValueError as exc:  # pydantic ValidationError and RenderError are both ValueErrors
        logger.error("Could not render %s: %s", args.card, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
