"""Publishing context threaded through every ``render()`` call.

Elements that emit URLs (Link, Image) use it to resolve root-relative paths
against the site URL. Containers only forward it.
"""
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict

from settings import Settings


class PublishingContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    site_url: str = "/"

    @classmethod
    def from_settings(cls, settings: Settings) -> "PublishingContext":
        return cls(site_url=settings.site_url)

    @property
    def base_path(self) -> str:
        """Path component of ``site_url`` without a trailing slash, e.g. ``/blog``."""
        return urlsplit(self.site_url).path.rstrip("/")

    def resolve(self, path: str) -> str:
        """Prefix root-relative paths with the site's base path.

        Absolute URLs, fragments and relative paths pass through unchanged.
        """
        if path.startswith("/") and not path.startswith("//"):
            return f"{self.base_path}{path}"
        return path
