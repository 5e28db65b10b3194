import argparse
import logging
import sys
from pathlib import Path

# Import configuration management
sys.path.append(str(Path(__file__).parent.parent))
from config_manager import ConfigManager, config_manager as default_config_manager

from flask import Flask, render_template_string, request

from app.analytics_helpers.factory import create_analytics_helpers_module
from gaq_tools import SetAllowLinker

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Templates
# -----------------------------------------------------------------------------

INDEX_TEMPLATE = """<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>{{ title }}</title>
  {{ analytics_init(extra_events, local=local) }}
</head>
<body>
  <h1>{{ title }}</h1>
  <p>Now playing: {{ video }}</p>
  {{ analytics_track_event("Videos", "Play", video) }}
</body>
</html>
"""

CHECKOUT_TEMPLATE = """<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>Order {{ order.order_id }}</title>
  {{ analytics_init(local=local) }}
</head>
<body>
  <h1>Thank you for your order</h1>
  {{ analytics_add_transaction(order.order_id, order.store_name, order.total, order.tax,
                               order.shipping, order.city, order.state, order.country) }}
  {% for item in order["items"] %}
  {{ analytics_add_item(order.order_id, item.sku, item.name, item.variation, item.price, item.quantity) }}
  {% endfor %}
  {{ analytics_track_transaction() }}
</body>
</html>
"""


def build_demo_order(order_id: str) -> dict:
    """Build the sample order shown on the demo checkout page."""
    return {
        "order_id": order_id,
        "store_name": "Acme Clothing",
        "total": "11.99",
        "tax": "1.29",
        "shipping": "5",
        "city": "San Jose",
        "state": "California",
        "country": "USA",
        "items": [
            {
                "sku": "DD44",
                "name": "T-Shirt",
                "variation": "Green Medium",
                "price": "11.99",
                "quantity": "1",
            }
        ],
    }


def create_app(config_manager: ConfigManager = None) -> Flask:
    """Create the demo Flask app with analytics helpers in the template context.

    Args:
        config_manager: Configuration source; the global instance when omitted

    Returns:
        Configured Flask application
    """
    config_manager = config_manager or default_config_manager
    analytics_config = config_manager.get_analytics_config()

    app = Flask(__name__)

    analytics_module = create_analytics_helpers_module(analytics_config)
    app.context_processor(analytics_module["context_processor"])
    app.extensions["analytics_helpers"] = analytics_module["service"]

    if not analytics_config.is_valid_tracker():
        logger.warning("No analytics tracker configured; pages using analytics helpers will fail")

    # -------------------------------------------------------------------------
    # Routes
    # -------------------------------------------------------------------------

    @app.get("/")
    def index():
        """Demo page with page initialization and a custom event."""
        extra_events = []
        if request.args.get("linker") == "1":
            extra_events.append(SetAllowLinker(True))

        return render_template_string(
            INDEX_TEMPLATE,
            title="GAQ view helpers",
            video=request.args.get("video", "Gone With the Wind"),
            extra_events=extra_events,
            local=_local_flag(),
        )

    @app.get("/checkout/<order_id>")
    def checkout(order_id):
        """Demo receipt page tracking an ecommerce transaction."""
        return render_template_string(
            CHECKOUT_TEMPLATE,
            order=build_demo_order(order_id),
            local=_local_flag(),
        )

    return app


def _local_flag():
    """Read ``?local=`` from the request; None keeps the configured default."""
    value = request.args.get("local")
    if value is None:
        return None
    return value.lower() in ("1", "true", "yes")


app = create_app()


if __name__ == "__main__":
    # Parse command line arguments
    parser = argparse.ArgumentParser(description="Demo server for the GAQ view helpers")
    parser.add_argument("--port", type=int, help="Port to run the server on")
    parser.add_argument("--host", type=str, help="Host to bind the server to")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args()

    app_config = default_config_manager.get_app_config()
    if args.port:
        app_config.port = args.port
    if args.host:
        app_config.host = args.host
    if args.debug:
        app_config.debug = args.debug

    app.run(
        host=app_config.host,
        port=app_config.port,
        debug=app_config.debug
    )
