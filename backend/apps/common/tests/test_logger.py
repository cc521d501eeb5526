import logging
from decimal import Decimal

from apps.common.logger import AppLogger, get_logger


def test_bind_merges_context_into_message(caplog):
    log = get_logger("apps.test", component="carts").bind(layer="service")
    with caplog.at_level(logging.INFO, logger="apps.test"):
        log.info("Discount applied", cart_id="12345670", total=Decimal("40.00"))
    assert caplog.records[-1].getMessage() == (
        "Discount applied | component=carts layer=service cart_id=12345670 total=40.00"
    )


def test_bind_returns_new_logger():
    base = get_logger("apps.test")
    bound = base.bind(view="HomeView")
    assert base.context == {}
    assert bound.context == {"view": "HomeView"}


def test_stringify_lists_and_objects():
    assert AppLogger._stringify(["a", 1]) == "a,1"
    assert AppLogger._stringify({"k": 1}) == "{'k': 1}"
