# models/article.py
from dataclasses import dataclass, asdict
from typing import Any, Dict

import jsonschema

from core.errors import ApiResponseError

ARTICLE_FIELDS_SCHEMA = {
    "type": "object",
    "properties": {
        "content": {"type": "string"},
        "title": {"type": "string"},
    },
    "required": ["content", "title"],
}

WRAPPED_ARTICLE_SCHEMA = {
    "type": "object",
    "properties": {"article": ARTICLE_FIELDS_SCHEMA},
    "required": ["article"],
}

FETCHED_ARTICLE_SCHEMA = {"anyOf": [WRAPPED_ARTICLE_SCHEMA, ARTICLE_FIELDS_SCHEMA]}


@dataclass
class Article:
    title: str = ""
    content: str = ""

    @classmethod
    def empty(cls) -> "Article":
        return cls(title="", content="")

    @classmethod
    def from_api(cls, data: Any) -> "Article":
        """
        Build an Article from a fetched JSON body, either
        {"article": {"content", "title"}} or a bare {"content", "title"}.
        """
        try:
            jsonschema.validate(instance=data, schema=FETCHED_ARTICLE_SCHEMA)
        except jsonschema.ValidationError as err:
            raise ApiResponseError(200, data, f"Unexpected article payload: {err.message}") from err

        if jsonschema.Draft7Validator(WRAPPED_ARTICLE_SCHEMA).is_valid(data):
            fields = data["article"]
        else:
            fields = data
        return cls(title=fields["title"], content=fields["content"])

    @property
    def has_content(self) -> bool:
        return self.content != ""

    def to_create_payload(self) -> Dict[str, str]:
        return {"content": self.content, "title": self.title}

    def to_update_payload(self) -> Dict[str, Dict[str, str]]:
        return {"article": self.to_create_payload()}

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
