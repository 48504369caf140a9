"""
Conversion between an Article and the banner-delimited document that is
handed to the user's text editor.

A document has three sections, always in this order:

    TITLE banner
    <title>

    CONTENT banner
    <content>

    DATE banner
    <date>

Each field is extracted independently: find the first occurrence of its
banner, skip past it, and take everything up to the next banner (or to the
end of the text for the date section), stripped of surrounding whitespace.
"""
from typing import NamedTuple

from models.article import Article
from templates.document_markers import (
    BANNERS,
    CONTENT_BEGIN,
    DATE_BEGIN,
    END,
    MARKER_NAMES,
    TITLE_BEGIN,
)
from .errors import AmbiguousDocument, MarkerNotFound

DOCUMENT_TEMPLATE = "{begin_title}\n{title}\n\n{begin_content}\n{content}\n\n{begin_date}\n{date}"


class DecodedDocument(NamedTuple):
    article: Article
    date: str


def encode(article: Article) -> str:
    # The date is not stored on the Article, so it always starts out blank.
    return DOCUMENT_TEMPLATE.format(
        begin_title=TITLE_BEGIN,
        title=article.title,
        begin_content=CONTENT_BEGIN,
        content=article.content,
        begin_date=DATE_BEGIN,
        date="",
    )


def seed_document(text: str) -> str:
    """Document for a new article whose content is pre-filled from a file."""
    return encode(Article(title="", content=text))


def extract(text: str, begin: str, end: str) -> str:
    start = text.find(begin)
    if start == -1:
        raise MarkerNotFound(MARKER_NAMES[begin])
    rest = text[start + len(begin):]

    if end == END:
        return rest.strip()

    stop = rest.find(end)
    if stop == -1:
        raise MarkerNotFound(MARKER_NAMES[end], after=MARKER_NAMES[begin])
    return rest[:stop].strip()


def _check_unambiguous(field: str, value: str):
    for banner in BANNERS:
        if banner in value:
            raise AmbiguousDocument(field, MARKER_NAMES[banner])


def decode_document(text: str) -> DecodedDocument:
    content = extract(text, CONTENT_BEGIN, DATE_BEGIN)
    date = extract(text, DATE_BEGIN, END)
    title = extract(text, TITLE_BEGIN, CONTENT_BEGIN)

    for field, value in (("title", title), ("content", content), ("date", date)):
        _check_unambiguous(field, value)

    return DecodedDocument(Article(title=title, content=content), date)


def decode(text: str) -> Article:
    """Decode an edited document; the date section is read and dropped."""
    return decode_document(text).article


def is_unchanged(original: str, edited: str) -> bool:
    return original == edited
