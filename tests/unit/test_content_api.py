"""Unit tests for the content API client."""
from unittest.mock import MagicMock

import pytest
import requests

from config import Config
from core import logger
from core.content_api import ContentApiClient
from core.errors import (
    ApiError,
    ApiResponseError,
    ClientApiError,
    ServerApiError,
    TransportError,
)
from models.article import Article

CONFIG = Config(
    secret_key="k",
    editor="vim",
    create_url="https://api.example.com/articles",
    update_url="https://api.example.com/articles/{slug}",
    delete_url="https://api.example.com/articles/{slug}",
    get_url="https://api.example.com/articles",
)


def make_response(status_code=200, json_body=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if json_body is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = json_body
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return ContentApiClient(CONFIG, session=session)


def test_fetch_article(client, session):
    session.request.return_value = make_response(
        json_body={"article": {"content": "World", "title": "Hello"}}
    )

    article = client.fetch_article("hello")

    assert article == Article(title="Hello", content="World")
    method, url = session.request.call_args.args
    assert (method, url) == ("GET", "https://api.example.com/articles/hello")
    assert "Authorization" not in session.request.call_args.kwargs["headers"]


def test_fetch_article_rejects_non_json(client, session):
    session.request.return_value = make_response(text="<html>")
    with pytest.raises(ApiResponseError):
        client.fetch_article("hello")


def test_create_article(client, session):
    session.request.return_value = make_response(json_body={"slug": "hello"})

    body = client.create_article(Article(title="Hello", content="World"), "hmac abc")

    assert body == {"slug": "hello"}
    call = session.request.call_args
    assert call.args == ("POST", "https://api.example.com/articles")
    assert call.kwargs["json"] == {"content": "World", "title": "Hello"}
    assert call.kwargs["headers"]["Authorization"] == "hmac abc"


def test_update_article(client, session):
    session.request.return_value = make_response(json_body={})

    client.update_article("hello", Article(title="Hello", content="World"), "hmac abc")

    call = session.request.call_args
    assert call.args == ("PATCH", "https://api.example.com/articles/hello")
    assert call.kwargs["json"] == {"article": {"content": "World", "title": "Hello"}}
    assert call.kwargs["headers"]["Authorization"] == "hmac abc"


def test_delete_article(client, session):
    session.request.return_value = make_response(text="")

    assert client.delete_article("hello", "hmac abc") == ""

    call = session.request.call_args
    assert call.args == ("DELETE", "https://api.example.com/articles/hello")
    assert call.kwargs["json"] is None
    assert call.kwargs["headers"]["Authorization"] == "hmac abc"


@pytest.mark.parametrize(
    "status, error_class",
    [(401, ClientApiError), (404, ClientApiError), (500, ServerApiError), (503, ServerApiError), (201, ApiError)],
)
def test_non_200_status(client, session, status, error_class):
    session.request.return_value = make_response(status_code=status, json_body={"error": "nope"})

    with pytest.raises(error_class) as exc_info:
        client.create_article(Article("t", "c"), "hmac abc")

    assert exc_info.value.status_code == status
    assert exc_info.value.body == {"error": "nope"}
    assert str(status) in str(exc_info.value)


def test_transport_error(client, session):
    session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(TransportError, match="refused"):
        client.delete_article("hello", "hmac abc")


def test_debug_event_lists_payload_fields(client, session, log_file, monkeypatch):
    monkeypatch.setattr(logger, "LOG_LEVEL", "DEBUG")
    session.request.return_value = make_response(json_body={})

    client.create_article(Article(title="Hello", content="World"), "hmac abc")

    log_text = log_file.read_text(encoding="utf-8")
    assert "Sending POST https://api.example.com/articles" in log_text
    assert '"fields": ["content", "title"]' in log_text
    assert "hmac abc" not in log_text
