# -*- coding: utf-8 -*-
"""
Tests for QuotationService.
"""
import json

import pytest

from services.exceptions import NetworkException
from services.quotation_service import QuotationService


class RecordingClient:
    """ApiClient double that records posts."""

    def __init__(self, responses=None, error=None):
        self.posts = []
        self.token = None
        self.responses = list(responses or [])
        self.error = error

    def set_access_token(self, token):
        self.token = token

    def post(self, endpoint, json_data):
        self.posts.append((endpoint, json_data))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0) if self.responses else None


FORM = {
    "serviceLevel": "fabrication",
    "materialType": "quartz",
    "name": "Sara Ahmed",
    "pieces": {
        "A": {"length": 2400, "width": 600, "thickness": 20},
        "B": {"length": 1200, "width": 600, "thickness": 20},
    },
}


def test_submit_posts_quotation_then_pieces():
    client = RecordingClient(responses=[{"id": 7}])
    service = QuotationService(client)

    result = service.submit_quotation(FORM, "LUX-2026-10-ABCDE", token="jwt")

    assert result == 7
    assert client.token == "jwt"

    endpoint, payload = client.posts[0]
    assert endpoint == "/quotations"
    assert payload["quote_id"] == "LUX-2026-10-ABCDE"
    assert payload["serviceLevel"] == "fabrication"
    assert json.loads(payload["quote_data"])["name"] == "Sara Ahmed"
    assert "created_at" in payload

    pieces = [body for endpoint, body in client.posts[1:] if endpoint == "/quotation_pieces"]
    assert len(pieces) == 2
    assert pieces[0] == {
        "quotation_id": 7,
        "piece_letter": "A",
        "length_mm": 2400,
        "width_mm": 600,
        "thickness_mm": 20,
    }


def test_submit_without_pieces_posts_once():
    client = RecordingClient(responses=[{"id": 1}])

    QuotationService(client).submit_quotation({"name": "Sara"}, "LUX-2026-10-XXXXX")

    assert len(client.posts) == 1
    assert client.token is None


def test_submit_does_not_mutate_form():
    client = RecordingClient(responses=[{"id": 1}])
    form = {"name": "Sara"}

    QuotationService(client).submit_quotation(form, "LUX-2026-10-XXXXX")

    assert form == {"name": "Sara"}


def test_submit_propagates_network_errors():
    client = RecordingClient(error=NetworkException("down"))

    with pytest.raises(NetworkException):
        QuotationService(client).submit_quotation(FORM, "LUX-2026-10-ABCDE")


def test_submit_without_token_clears_previous_header():
    client = RecordingClient(responses=[{"id": 1}, {"id": 2}])
    service = QuotationService(client)

    service.submit_quotation({"name": "Sara"}, "LUX-2026-10-AAAAA", token="old-jwt")
    service.submit_quotation({"name": "Omar"}, "LUX-2026-10-BBBBB")

    assert client.token is None


def test_pieces_skipped_when_backend_returns_no_id():
    client = RecordingClient(responses=[{}])

    result = QuotationService(client).submit_quotation(FORM, "LUX-2026-10-ABCDE")

    assert result is None
    assert [endpoint for endpoint, _ in client.posts] == ["/quotations"]
