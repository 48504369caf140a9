"""
The create, update and delete flows: render the article into a document,
let the user edit it, decode the result, sign it and send it.

Nothing in here exits the process. Failures propagate as BlawgError
subclasses and the CLI decides how to report them.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from core import document_codec
from core.content_api import ContentApiClient
from core.editor import EditorLauncher
from core.logger import log_event
from core.signer import Operation, RequestSigner
from models.article import Article
from utils.file_handler import edit_in_tempfile, read_seed_file


class PublishStatus(Enum):
    PUBLISHED = "Posted"
    UPDATED = "Updated"
    DELETED = "Deleted"
    NO_CHANGES = "No changes"
    EMPTY_CONTENT = "No content to publish"


@dataclass
class PublishResult:
    status: PublishStatus
    article: Optional[Article] = None
    body: Any = None

    @property
    def message(self) -> str:
        return self.status.value


class Publisher:
    def __init__(self, config, client=None, launcher=None, signer=None):
        self.config = config
        self.client = client or ContentApiClient(config)
        self.launcher = launcher or EditorLauncher(config.editor)
        self.signer = signer or RequestSigner(config.secret_key)

    def _edit(self, original: str):
        edited = edit_in_tempfile(original, self.launcher)
        if document_codec.is_unchanged(original, edited):
            log_event("INFO", "Document unchanged, nothing to send")
            return None
        return document_codec.decode_document(edited)

    def create(self, seed_path=None) -> PublishResult:
        if seed_path is not None:
            original = document_codec.seed_document(read_seed_file(seed_path))
        else:
            original = document_codec.encode(Article.empty())

        decoded = self._edit(original)
        if decoded is None:
            return PublishResult(PublishStatus.NO_CHANGES)
        article = decoded.article
        if not article.has_content:
            log_event("WARNING", "Edited document has no content")
            return PublishResult(PublishStatus.EMPTY_CONTENT, article)

        token = self.signer.sign_for(Operation.CREATE, article)
        body = self.client.create_article(article, token)
        log_event("SUCCESS", "Article created", {"title": article.title})
        return PublishResult(PublishStatus.PUBLISHED, article, body)

    def update(self, slug: str) -> PublishResult:
        existing = self.client.fetch_article(slug)
        log_event("INFO", f"Fetched article {slug}", {"title": existing.title})

        decoded = self._edit(document_codec.encode(existing))
        if decoded is None:
            return PublishResult(PublishStatus.NO_CHANGES, existing)
        article = decoded.article
        if not article.has_content:
            log_event("WARNING", f"Edited document for {slug} has no content")
            return PublishResult(PublishStatus.EMPTY_CONTENT, article)

        token = self.signer.sign_for(Operation.UPDATE, article, date=decoded.date)
        body = self.client.update_article(slug, article, token)
        log_event("SUCCESS", f"Article {slug} updated", {"title": article.title})
        return PublishResult(PublishStatus.UPDATED, article, body)

    def delete(self, slug: str) -> PublishResult:
        token = self.signer.sign_for(Operation.DELETE, Article.empty())
        body = self.client.delete_article(slug, token)
        log_event("SUCCESS", f"Article {slug} deleted")
        return PublishResult(PublishStatus.DELETED, body=body)
