"""Unit tests for landing template loading and rendering."""

from __future__ import annotations

import logging
from pathlib import Path

from myapp.config import DEFAULT_TEMPLATE_PATH
from myapp.landing import ENVIRONMENT_MARKER, VERSION_MARKER, load_landing_template, render_landing


def test_bundled_template_has_both_markers() -> None:
    template = load_landing_template(DEFAULT_TEMPLATE_PATH)

    assert template is not None
    assert ENVIRONMENT_MARKER in template
    assert VERSION_MARKER in template


def test_missing_template_disables_html(tmp_path: Path, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="myapp.landing"):
        assert load_landing_template(tmp_path / "missing.html") is None

    assert "HTML disabled" in caplog.text


def test_no_template_path() -> None:
    assert load_landing_template(None) is None


def test_render_replaces_every_marker() -> None:
    page = render_landing("{{ENVIRONMENT}}/{{VERSION}}/{{ENVIRONMENT}}", "prod", "1.2.3")

    assert page == "prod/1.2.3/prod"


def test_render_escapes_values() -> None:
    page = render_landing("<p>{{ENVIRONMENT}}</p>", "<script>x</script>", "1")

    assert page == "<p>&lt;script&gt;x&lt;/script&gt;</p>"
