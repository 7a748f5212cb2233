"""Helpers for naming bookmarks, files and clipboard content dropped on the panel."""

from __future__ import annotations

import os
import re
import time
from enum import Enum
from typing import Callable
from urllib.parse import urlsplit

_TITLE = re.compile(r"<(?:title|TITLE)>(.+)</\s*(?:title|TITLE)>")
_FORBIDDEN_CHARS = "\\/:*?\"<>|'\n\t"
_FORBIDDEN = str.maketrans("", "", _FORBIDDEN_CHARS)


class PasteKind(Enum):
    """Kind of clipboard or drop content, valued by its menu label."""

    URLS = "URL"
    WEB_URL = "网址"
    LOCAL_FILE = "文件"
    TEXT = "文本"
    HTML = "富文本"
    IMAGE = "图像"
    COLOR = "颜色"

    @property
    def label(self) -> str:
        """Name shown in the paste menu entry."""
        return self.value


def page_title_name(url: str, source: str) -> str:
    """Pick a short bookmark name from a page's HTML title; empty if there is none."""
    if not source:
        return ""
    match = _TITLE.search(source)
    if match is None:
        return ""
    full_title = match.group(1).strip()

    if "-" in full_title and not full_title.startswith("-"):
        name = full_title[: full_title.rfind("-")].strip()
        if name.lower() in url:
            # The left part names the site itself, so the right part is the page.
            name = full_title[full_title.find("-") + 1:].strip()
    else:
        name = full_title

    if not name:
        name = full_title
    if ":" in name and not name.startswith(":"):
        name = name[: name.find(":")].strip()
    return name


def favicon_url(url: str) -> str:
    """Address of the site icon that belongs to ``url``."""
    parts = urlsplit(url)
    host = parts.hostname or ""
    try:
        port = parts.port
    except ValueError:
        port = None
    index = url.find(host)
    prefix = url if index < 0 else url[:index]
    port_part = f":{port}" if port is not None and port > 0 else ""
    return f"{prefix}{host}{port_part}/favicon.ico"


def default_bookmark_name(url: str) -> str:
    """Guess a name from a URL: its last path part without query or extension."""
    name = url
    if "?" in name:
        name = name[: name.find("?")]
    if "/" in name:
        name = name[name.rfind("/") + 1:]
    if "." in name:
        name = name[: name.find(".")]
    return name


def sanitize_file_name(name: str) -> str:
    """Remove characters that cannot appear in a file name."""
    return name.translate(_FORBIDDEN)


def split_suffix(name: str) -> tuple[str, str]:
    """Split a file name into stem and suffix (with its dot).

    A name that is all suffix gets the current time in milliseconds as stem.
    """
    if "." not in name:
        return name, ""
    pos = name.rfind(".")
    stem, suffix = name[:pos], name[pos:]
    if not stem:
        stem = str(time.time_ns() // 1_000_000)
    return stem, suffix


def classify_text_paste(
    text: str, exists: Callable[[str], bool] = os.path.exists
) -> PasteKind:
    """Decide whether pasted text is a web address, a local file or plain text."""
    if "\n" not in text:
        if text.startswith("http://") or text.startswith("https://"):
            return PasteKind.WEB_URL
        if exists(text):
            return PasteKind.LOCAL_FILE
    return PasteKind.TEXT