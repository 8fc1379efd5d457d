"""
Index view tests (no database needed)
"""
from django.test import RequestFactory
from django.urls import reverse

from home.data import get_all
from home.views import index


def _get_index():
    request = RequestFactory().get("/")
    return index(request)


def test_index_url():
    assert reverse("home:index") == "/"


def test_index_renders_all_projects_in_order():
    response = _get_index()
    assert response.status_code == 200

    html = response.content.decode("utf-8")
    positions = [html.index(p.title) for p in get_all()]
    assert positions == sorted(positions)


def test_index_renders_images_and_links():
    html = _get_index().content.decode("utf-8")
    assert 'src="/static/images/nz-thennow.jpg"' in html
    assert 'href="https://github.com/kpoxo6op/cv"' in html
    assert 'href="/blog/soyspray-series.mdx"' in html


def test_external_links_open_in_new_tab():
    html = _get_index().content.decode("utf-8")
    assert 'href="https://thennow.nz" target="_blank" rel="noopener noreferrer"' in html
    assert 'href="/blog/soyspray-series.mdx">' in html


def test_index_rejects_post():
    response = index(RequestFactory().post("/"))
    assert response.status_code == 405
