# home/data.py
"""
Portfolio projects shown on the index page.

Data only. Records are checked when they are built, so a malformed entry
fails at import instead of on a request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


def _is_url(value: str) -> bool:
    return value.startswith(("https://", "http://"))


def _is_site_path(value: str) -> bool:
    # "//host/x" is protocol-relative, i.e. another site
    return value.startswith("/") and not value.startswith("//")


@dataclass(frozen=True)
class Project:
    """One project card: title, description, optional link and image."""
    title: str
    description: str
    href: Optional[str] = None
    img_src: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("title", "description", "href", "img_src"):
            value = getattr(self, name)
            if value is None and name in ("href", "img_src"):
                continue
            if not isinstance(value, str):
                raise ValueError(f"{name} of {self.title!r} must be a string, got {value!r}.")
        if not self.title or not self.title.strip():
            raise ValueError("title must not be empty.")
        if not self.description or not self.description.strip():
            raise ValueError(f"description of {self.title!r} must not be empty.")
        if self.href is not None and not (_is_url(self.href) or _is_site_path(self.href)):
            raise ValueError(
                f"href of {self.title!r} must be an absolute URL or start with '/', got {self.href!r}."
            )
        if self.img_src is not None and not _is_site_path(self.img_src):
            raise ValueError(f"img_src of {self.title!r} must be a site path starting with '/', got {self.img_src!r}.")

    @property
    def is_external(self) -> bool:
        return self.href is not None and _is_url(self.href)

    def as_dict(self) -> Dict[str, str]:
        """Plain dict with the camelCase keys of the site's data files. Absent fields are left out."""
        d = {"title": self.title, "description": self.description}
        if self.href is not None:
            d["href"] = self.href
        if self.img_src is not None:
            d["imgSrc"] = self.img_src
        return d


PROJECTS: Tuple[Project, ...] = (
    Project(
        title="New Zealand Then and Now",
        description=(
            "Photographs with sliders that compare past and present views of locations "
            "across New Zealand, showing how places have changed over time"
        ),
        img_src="/static/images/nz-thennow.jpg",
        href="https://thennow.nz",
    ),
    Project(
        title="Markdown to PDF CV builder",
        description="Create CV in PDF format markdown",
        img_src="/static/images/time-machine.jpg",
        href="https://github.com/kpoxo6op/cv",
    ),
    Project(
        title="Soyspray",
        description="Kubernetes Cluster Powered by Kubespray",
        img_src="/static/images/soy-project-banner-1000.jpg",
        href="/blog/soyspray-series.mdx",
    ),
)


def get_all() -> Tuple[Project, ...]:
    return PROJECTS
