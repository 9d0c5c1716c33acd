"""Reusable helpers for composing Markdown messages."""

from __future__ import annotations
from tracking import t

from typing import Iterable, List
from telegram.helpers import escape_markdown


def escape_telegram_markdown(text: object) -> str:
    """Escape text for legacy Telegram Markdown (``parse_mode='Markdown'``)."""
    t('botapp.ui.text_blocks.escape_telegram_markdown')
    return escape_markdown(str(text), version=1)


def bold_telegram_text(text: object) -> str:
    t('botapp.ui.text_blocks.bold_telegram_text')
    return f"*{escape_telegram_markdown(text)}*"


def italic_telegram_text(text: object) -> str:
    t('botapp.ui.text_blocks.italic_telegram_text')
    return f"_{escape_telegram_markdown(text)}_"


def code_telegram_text(text: object) -> str:
    """Inline code span; backticks inside ``text`` are dropped."""
    t('botapp.ui.text_blocks.code_telegram_text')
    return f"`{str(text).replace('`', '')}`"


class MarkdownBlockBuilder:
    """Utility for building Markdown messages with bullet support."""

    __slots__ = ("_lines",)

    def __init__(self) -> None:
        t("botapp.ui.text_blocks.MarkdownBlockBuilder.__init__")
        self._lines: List[str] = []

    def line(self, text: str = "") -> "MarkdownBlockBuilder":
        t('botapp.ui.text_blocks.MarkdownBlockBuilder.line')
        self._lines.append(text)
        return self

    def heading(self, text: str) -> "MarkdownBlockBuilder":
        t('botapp.ui.text_blocks.MarkdownBlockBuilder.heading')
        if text:
            self._lines.append(text)
        return self

    def bullet(self, text: str) -> "MarkdownBlockBuilder":
        t('botapp.ui.text_blocks.MarkdownBlockBuilder.bullet')
        if text:
            self._lines.append(f"• {text}")
        return self

    def bullets(self, items: Iterable[str]) -> "MarkdownBlockBuilder":
        t('botapp.ui.text_blocks.MarkdownBlockBuilder.bullets')
        for item in items:
            self.bullet(item)
        return self

    def blank(self) -> "MarkdownBlockBuilder":
        t('botapp.ui.text_blocks.MarkdownBlockBuilder.blank')
        self._lines.append("")
        return self

    def build(self) -> str:
        t('botapp.ui.text_blocks.MarkdownBlockBuilder.build')
        return "\n".join(self._lines)


__all__ = [
    "MarkdownBlockBuilder",
    "escape_telegram_markdown",
    "bold_telegram_text",
    "code_telegram_text",
    "italic_telegram_text",
]
