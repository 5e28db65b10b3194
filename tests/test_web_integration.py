"""
Integration tests for the demo Flask app using the analytics helpers in templates.
"""

import json
import os
import re
from unittest.mock import patch

import pytest

from app.main import build_demo_order, create_app
from config_manager import ConfigManager
from gaq_tools import MissingTrackerConfiguration


def make_app(tmp_path, analytics: dict):
    config_file = tmp_path / "web_app_config.json"
    config_file.write_text(json.dumps({"analytics": analytics}))
    with patch.dict(os.environ, {}, clear=True):
        manager = ConfigManager(str(config_file))
    app = create_app(manager)
    app.config['TESTING'] = True
    return app


def push_lines(html: str) -> list:
    return [line.strip() for line in html.splitlines() if "_gaq.push(" in line]


class TestIndexPage:
    """Test page initialization rendered through Jinja."""

    @pytest.fixture
    def client(self, tmp_path):
        return make_app(tmp_path, {"tracker": "UA-12345-1"}).test_client()

    def test_index_renders_bootstrap_and_event(self, client):
        res = client.get('/')
        assert res.status_code == 200

        html = res.get_data(as_text=True)
        assert push_lines(html) == [
            '_gaq.push(["_setAccount", "UA-12345-1"]);',
            '_gaq.push(["_trackPageview"]);',
            '_gaq.push(["_trackPageLoadTime"]);',
            '_gaq.push(["_trackEvent", "Videos", "Play", "Gone With the Wind"]);',
        ]

    def test_script_is_not_html_escaped(self, client):
        """Helper output is Markup, so autoescaping leaves it intact."""
        html = client.get('/').get_data(as_text=True)
        assert '<script type="text/javascript">' in html
        assert "&lt;script" not in html
        assert "&#34;" not in html

    def test_local_mode_from_query(self, client):
        html = client.get('/?local=1').get_data(as_text=True)
        lines = push_lines(html)
        assert '_gaq.push(["_setDomainName", "none"]);' in lines
        assert '_gaq.push(["_setAllowLinker", true]);' in lines

    def test_extra_events_after_bootstrap(self, client):
        lines = push_lines(client.get('/?linker=1').get_data(as_text=True))
        assert lines[3] == '_gaq.push(["_setAllowLinker", true]);'

    def test_user_input_cannot_close_script(self, client):
        html = client.get('/', query_string={"video": "</script><script>alert(1)</script>"}).get_data(as_text=True)
        assert "<script>alert(1)" not in html
        assert len(re.findall(r"<script\b", html)) == 2

    def test_configured_local_default(self, tmp_path):
        client = make_app(tmp_path, {"tracker": "UA-12345-1", "local": True}).test_client()

        assert len(push_lines(client.get('/').get_data(as_text=True))) == 6
        assert len(push_lines(client.get('/?local=0').get_data(as_text=True))) == 4


class TestCheckoutPage:
    """Test the ecommerce helpers rendered through Jinja."""

    def test_checkout_tracks_transaction(self, tmp_path):
        client = make_app(tmp_path, {"tracker": "UA-12345-1"}).test_client()
        html = client.get('/checkout/1234').get_data(as_text=True)

        lines = push_lines(html)
        assert lines[3:] == [
            '_gaq.push(["_addTrans", "1234", "Acme Clothing", "11.99", "1.29", "5", '
            '"San Jose", "California", "USA"]);',
            '_gaq.push(["_addItem", "1234", "DD44", "T-Shirt", "Green Medium", "11.99", "1"]);',
            '_gaq.push(["_trackTrans"]);',
        ]

    def test_named_tracker(self, tmp_path):
        client = make_app(tmp_path, {"tracker": "UA-12345-1", "tracker_name": "t2"}).test_client()
        lines = push_lines(client.get('/checkout/1234').get_data(as_text=True))
        assert all('"t2._' in line for line in lines)

    def test_demo_order(self):
        order = build_demo_order("42")
        assert order["order_id"] == "42"
        assert order["items"][0]["sku"] == "DD44"


class TestMissingTrackerPage:
    """Pages using the helpers fail loudly without a tracker."""

    def test_index_raises(self, tmp_path):
        client = make_app(tmp_path, {"tracker": ""}).test_client()
        with pytest.raises(MissingTrackerConfiguration):
            client.get('/')

    def test_checkout_raises(self, tmp_path):
        client = make_app(tmp_path, {"tracker": "UA-xxxxx-x"}).test_client()
        with pytest.raises(MissingTrackerConfiguration):
            client.get('/checkout/1234')

    def test_returns_500_when_not_propagating(self, tmp_path):
        app = make_app(tmp_path, {"tracker": ""})
        app.config['TESTING'] = False
        app.config['PROPAGATE_EXCEPTIONS'] = False
        assert app.test_client().get('/').status_code == 500

    def test_helpers_registered_on_app(self, tmp_path):
        app = make_app(tmp_path, {"tracker": "UA-12345-1"})
        assert app.extensions["analytics_helpers"].config.tracker == "UA-12345-1"
