"""
Automatic link detection for Python-Markdown.

Turns bare ``http://``, ``https://`` and ``www.`` URLs in prose into links.
Runs over the element tree once inline parsing is done, so Markdown links,
autolinks and code are already elements and are skipped whole. Raw inline
HTML is still a stash placeholder at that point; opening and closing raw
``<a>`` tags are tracked so text inside a hand-written anchor is left alone.
"""

import re
import xml.etree.ElementTree as etree

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from markdown.util import HTML_PLACEHOLDER, HTML_PLACEHOLDER_RE, AtomicString, ETX, STX

URL_RE = re.compile(
    r"(?<![\w/@=\"'])"
    r"((?:https?://|www\.)[^\s<>\"'`" + re.escape(STX) + re.escape(ETX) + r"]+)"
)

BARE_PREFIX_RE = re.compile(r"^(?:https?://|www\.?)")

RAW_ANCHOR_OPEN_RE = re.compile(r"<a[\s>]", re.IGNORECASE)
RAW_ANCHOR_CLOSE_RE = re.compile(r"</a\s*>", re.IGNORECASE)

TRAILING_PUNCTUATION = ".,:;!?*_~"

SKIP_TAGS = {"a", "code", "pre", "script", "style"}


class LinkifyTreeprocessor(Treeprocessor):
    """Wrap bare URLs found in element text and tails in <a> elements."""

    def run(self, root):
        for block in list(root):
            # A raw <a> never spans blocks
            self.anchor_depth = 0
            if block.tag not in SKIP_TAGS:
                self._walk(block)

    def _walk(self, parent):
        children = list(parent)

        if parent.text and not isinstance(parent.text, AtomicString):
            parent.text, links = self._linkify(parent.text)
            for offset, link in enumerate(links):
                parent.insert(offset, link)

        for child in children:
            if child.tag not in SKIP_TAGS:
                self._walk(child)
            if child.tail and not isinstance(child.tail, AtomicString):
                child.tail, links = self._linkify(child.tail)
                index = list(parent).index(child)
                for offset, link in enumerate(links, start=1):
                    parent.insert(index + offset, link)

    def _linkify(self, text: str):
        """
        Split text around bare URLs.

        Returns:
            The text before the first link, and the new link elements with
            the remaining text distributed over their tails.
        """
        lead = None
        links = []
        buffer = []

        def attach(chunk):
            nonlocal lead
            if links:
                links[-1].tail = chunk
            else:
                lead = chunk

        # re.split with one group alternates text and placeholder indexes
        parts = HTML_PLACEHOLDER_RE.split(text)
        for i, part in enumerate(parts):
            if i % 2:
                buffer.append(HTML_PLACEHOLDER % part)
                self._track_raw_html(int(part))
                continue
            if self.anchor_depth:
                buffer.append(part)
                continue

            pos = 0
            for m in URL_RE.finditer(part):
                url = _trim_url(m.group(1))
                if not BARE_PREFIX_RE.sub("", url):
                    continue
                buffer.append(part[pos:m.start(1)])
                attach("".join(buffer))
                buffer = []
                links.append(_make_link(url))
                pos = m.start(1) + len(url)
            buffer.append(part[pos:])

        attach("".join(buffer))
        return lead, links

    def _track_raw_html(self, index: int) -> None:
        raw = self.md.htmlStash.rawHtmlBlocks[index]
        if not isinstance(raw, str):
            return
        if RAW_ANCHOR_OPEN_RE.match(raw):
            self.anchor_depth += 1
        elif RAW_ANCHOR_CLOSE_RE.match(raw):
            self.anchor_depth = max(0, self.anchor_depth - 1)


class LinkifyExtension(Extension):
    """Register the linkify tree processor."""

    def extendMarkdown(self, md):
        # After inline parsing (20), before smarty (2) touches the tails.
        md.treeprocessors.register(LinkifyTreeprocessor(md), "linkify", 15)


def _make_link(url: str):
    el = etree.Element("a")
    el.set("href", url if "://" in url else f"http://{url}")
    el.text = AtomicString(url)
    return el


def _trim_url(url: str) -> str:
    """Drop trailing sentence punctuation and unbalanced closing parens."""
    while url:
        if url[-1] in TRAILING_PUNCTUATION:
            url = url[:-1]
        elif url[-1] == ")" and url.count(")") > url.count("("):
            url = url[:-1]
        else:
            break
    return url


def makeExtension(**kwargs):
    return LinkifyExtension(**kwargs)
