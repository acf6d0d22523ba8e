from __future__ import annotations

import logging

from intgraph.service import ServiceRouter


def test_rejected_request_is_logged_as_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="intgraph"):
        response = ServiceRouter().handle("/apsp/0/1/1")
    assert response.status == 400
    (record,) = [r for r in caplog.records if r.name == "intgraph.service"]
    assert record.levelno == logging.WARNING
    assert "Rejected apsp request" in record.getMessage()


def test_dispatch_is_logged_at_debug(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="intgraph"):
        ServiceRouter().handle("/min/4/2")
    assert any(
        r.levelno == logging.DEBUG and "Dispatching min" in r.getMessage()
        for r in caplog.records
    )
