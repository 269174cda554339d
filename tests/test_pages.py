"""Tests for the HTML pages."""
from datetime import datetime

from employee_portal_api.app.pages import format_local_time, render_landing


def test_landing_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "企業員工管理系統" in response.text
    assert "3.0.0" in response.text
    assert 'href="/health"' in response.text
    assert 'href="/api/login"' in response.text


def test_landing_embeds_render_time():
    page = render_landing("企業員工管理系統", "3.0.0", now=datetime(2025, 8, 4, 9, 5, 0))
    assert "部署時間: 2025/08/04 09:05:00" in page


def test_format_local_time_defaults_to_now():
    assert format_local_time().startswith(str(datetime.now().year))


def test_project_name_is_escaped():
    page = render_landing("<b>demo</b>", "3.0.0")
    assert "<b>demo</b>" not in page
    assert "&lt;b&gt;demo&lt;/b&gt;" in page


def test_dashboard_page(client):
    response = client.get("/dashboard")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    text = response.text
    assert "fetch('/health')" in text
    assert "fetch('/api/products')" in text
    assert "sessionStorage.clear()" in text
    assert "window.location.href = '/api/login'" in text
