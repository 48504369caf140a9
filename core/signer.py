"""
Request signing for mutating calls to the content API.

The signed message is the article's content and title plus a fixed set of
literal key names per operation, sorted and concatenated with no separator.
The server recomputes the same string, so the key sets below are part of
the wire contract.
"""
import hashlib
import hmac
from enum import Enum
from typing import Dict, Iterable, List, NamedTuple, Tuple

from models.article import Article
from .errors import ConfigError

AUTH_SCHEME = "hmac"


class Operation(Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class SigningPolicy(NamedTuple):
    keys: Tuple[str, ...]
    include_date: bool = False


SIGNING_POLICY: Dict[Operation, SigningPolicy] = {
    Operation.CREATE: SigningPolicy(keys=("content", "title")),
    Operation.UPDATE: SigningPolicy(keys=("article", "content", "date", "title"), include_date=True),
    # Deletes are signed over an empty article.
    Operation.DELETE: SigningPolicy(keys=()),
}


def canonical_params(article: Article, extra_keys: Iterable[str]) -> List[str]:
    params = [article.content, article.title]
    params.extend(extra_keys)
    # Code point order matches UTF-8 byte order.
    return sorted(params)


def canonical_string(article: Article, extra_keys: Iterable[str]) -> str:
    return "".join(canonical_params(article, extra_keys))


class RequestSigner:
    def __init__(self, secret_key: str):
        if not secret_key:
            raise ConfigError("'BLAWG_SECRET_KEY' environment variable undefined.")
        self._key = secret_key.encode("utf-8")

    def sign(self, article: Article, extra_keys: Iterable[str] = ()) -> str:
        """
        Return the Authorization header value for the given article and
        literal parameter keys: "hmac " followed by the lowercase hex
        HMAC-SHA256 of the canonical string.
        """
        message = canonical_string(article, extra_keys).encode("utf-8")
        digest = hmac.new(self._key, message, hashlib.sha256).hexdigest()
        return f"{AUTH_SCHEME} {digest}"

    def sign_for(self, operation: Operation, article: Article, date: str = "") -> str:
        policy = SIGNING_POLICY[operation]
        if operation is Operation.DELETE:
            article = Article.empty()
        extra_keys = list(policy.keys)
        if policy.include_date:
            extra_keys.append(date)
        return self.sign(article, extra_keys)
