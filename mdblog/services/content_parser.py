"""Flat ``key: value`` frontmatter for post files.

Post files carry a header of plain ``key: value`` lines between two ``---``
lines. Values are kept as trimmed strings, never interpreted as YAML, so a
title such as ``Python: the good parts`` or a date such as ``2024-01-01``
comes back exactly as written.
"""

import re

import frontmatter
from frontmatter.default_handlers import BaseHandler


class KeyValueHandler(BaseHandler):
    """python-frontmatter handler for flat ``key: value`` headers."""

    # Header must open the file and the closing delimiter must end its line.
    FM_BOUNDARY = re.compile(r"\A---\n(.*?)\n---\n(.*)\Z", re.DOTALL)
    START_DELIMITER = END_DELIMITER = "---"

    def detect(self, text: str) -> bool:
        return self.FM_BOUNDARY.match(text) is not None

    def split(self, text: str) -> tuple[str, str]:
        match = self.FM_BOUNDARY.match(text)
        if match is None:
            raise ValueError("no frontmatter block at start of text")
        fm, content = match.groups()
        # Drop the blank separator line written by format()
        if content.startswith("\n"):
            content = content[1:]
        return fm, content

    def load(self, fm: str) -> dict[str, str]:
        metadata: dict[str, str] = {}
        for line in fm.split("\n"):
            key, sep, value = line.partition(":")
            key = key.strip()
            if not sep or not key:
                continue
            metadata[key] = value.strip()
        return metadata

    def export(self, metadata: dict, **kwargs) -> str:
        return "\n".join(
            f"{key}: {_flatten(value)}" for key, value in metadata.items()
        )

    def format(self, post: frontmatter.Post, **kwargs) -> str:
        # BaseHandler.format strips the whole document, which would eat
        # trailing whitespace in the content.
        start_delimiter = kwargs.pop("start_delimiter", self.START_DELIMITER)
        end_delimiter = kwargs.pop("end_delimiter", self.END_DELIMITER)
        metadata = self.export(post.metadata, **kwargs)
        return f"{start_delimiter}\n{metadata}\n{end_delimiter}\n\n{post.content}"


handler = KeyValueHandler()


def parse_frontmatter(text: str) -> frontmatter.Post:
    """Split raw file text into header mapping and body.

    Text without a leading header block is returned whole as the body with
    empty metadata.
    """
    post = frontmatter.Post("", handler)
    try:
        fm, content = handler.split(text)
    except ValueError:
        post.content = text
        return post
    post.content = content
    post.metadata.update(handler.load(fm))
    return post


def render_post(title: str, date: str, excerpt: str, content: str) -> str:
    post = frontmatter.Post(content, handler)
    post.metadata.update({"title": title, "date": date, "excerpt": excerpt})
    return frontmatter.dumps(post, handler=handler)


def _flatten(value) -> str:
    if value is None:
        return ""
    return " ".join(str(value).splitlines()).strip()
