import requests

from models.article import Article
from .errors import ApiResponseError, TransportError, api_error_for
from .logger import log_event

SUCCESS_STATUS = 200


class ContentApiClient:
    def __init__(self, config, session: requests.Session = None):
        self.config = config
        self.session = session or requests.Session()
        self.headers = {
            "Content-Type": "application/json",
            "User-Agent": "blawg",
        }

    def _request(self, method: str, url: str, token: str = None, payload: dict = None):
        headers = dict(self.headers)
        if token is not None:
            headers["Authorization"] = token

        log_event("DEBUG", f"Sending {method} {url}", {"fields": sorted(payload) if payload else []})
        try:
            response = self.session.request(method, url, headers=headers, json=payload)
        except requests.RequestException as err:
            log_event("ERROR", f"{method} {url} failed: {err}")
            raise TransportError(f"Could not reach {url}: {err}") from err

        body = self._body(response)
        if response.status_code != SUCCESS_STATUS:
            log_event("ERROR", f"{method} {url} returned {response.status_code}", {"body": body})
            raise api_error_for(response.status_code, body)

        log_event("INFO", f"{method} {url} returned {response.status_code}")
        return body

    @staticmethod
    def _body(response):
        try:
            return response.json()
        except ValueError:
            return response.text

    def fetch_article(self, slug: str) -> Article:
        url = self.config.get_url_for(slug)
        body = self._request("GET", url)
        if not isinstance(body, dict):
            raise ApiResponseError(SUCCESS_STATUS, body, f"Expected a JSON article from {url}")
        return Article.from_api(body)

    def create_article(self, article: Article, token: str):
        return self._request("POST", self.config.create_url, token, article.to_create_payload())

    def update_article(self, slug: str, article: Article, token: str):
        return self._request("PATCH", self.config.update_url_for(slug), token, article.to_update_payload())

    def delete_article(self, slug: str, token: str):
        return self._request("DELETE", self.config.delete_url_for(slug), token)
