from dataclasses import dataclass
from datetime import date
from typing import Optional

from markupsafe import Markup


@dataclass(frozen=True)
class PostLink:
    """Referencia ligera a un post vecino (sólo slug y título)."""
    slug: str
    title: str

    @property
    def url(self):
        return f"{self.slug}.html"


@dataclass(frozen=True)
class Post:
    slug: str
    title: str
    description: str
    publish_date: date
    body_html: str
    prev: Optional[PostLink] = None  # post más reciente
    next: Optional[PostLink] = None  # post más antiguo

    @property
    def url(self):
        return f"{self.slug}.html"

    @property
    def content(self):
        # HTML de confianza: la plantilla no debe escaparlo
        return Markup(self.body_html)

    @property
    def date_fmt(self):
        # "January 2, 2006" sin depender del locale para el día
        return f"{self.publish_date.strftime('%B')} {self.publish_date.day}, {self.publish_date.year}"

    @property
    def date_iso(self):
        return self.publish_date.isoformat()

    def link(self):
        return PostLink(slug=self.slug, title=self.title)
