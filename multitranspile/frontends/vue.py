"""Vue single-file component front-end

Splits a ``.vue`` file into its top-level blocks (template, script,
script setup, styles and custom blocks), the way the Vue SFC compiler does,
and hands the script block's content to the shared parser.

Only depth-0 tags open blocks. Nested tags with the same name as the open
block (``<template>`` inside ``<template>``) are counted so the block ends
at its own closing tag. Script and style contents are raw text, so HTML
comment markers inside them are plain characters; outside them, tags
within comments are skipped.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from multitranspile.frontends.base import ScriptFrontend

_TAG_RE = re.compile(r"<(/?)([A-Za-z][\w:-]*)((?:\s+[^>]*?)?)\s*(/?)>")
_ATTR_RE = re.compile(
    r"""([^\s"'>/=]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'=<>`]+)))?"""
)

_RAW_TEXT_BLOCKS = frozenset({"script", "style"})


@dataclass
class SFCBlock:
    """One top-level block of a single-file component

    Attributes:
        type: Tag name (template, script, style or a custom name)
        content: Raw text between the opening and closing tags
        attrs: Tag attributes; valueless attributes map to True
        start: Offset of the content start in the file
        end: Offset of the content end in the file
    """
    type: str
    content: str
    attrs: Dict[str, object] = field(default_factory=dict)
    start: int = 0
    end: int = 0

    @property
    def lang(self) -> Optional[str]:
        value = self.attrs.get("lang")
        return value if isinstance(value, str) else None

    @property
    def is_setup(self) -> bool:
        return "setup" in self.attrs


@dataclass
class SFCDescriptor:
    """All blocks of a single-file component"""
    template: Optional[SFCBlock] = None
    script: Optional[SFCBlock] = None
    script_setup: Optional[SFCBlock] = None
    styles: List[SFCBlock] = field(default_factory=list)
    custom_blocks: List[SFCBlock] = field(default_factory=list)


def parse_attrs(attr_text: str) -> Dict[str, object]:
    """Parse the attribute part of an opening tag

    Args:
        attr_text: Text after the tag name (e.g. `` setup lang="ts"``)

    Returns:
        Attribute mapping; attributes without a value map to True
    """
    attrs: Dict[str, object] = {}
    for match in _ATTR_RE.finditer(attr_text):
        name = match.group(1)
        values = [v for v in match.group(2, 3, 4) if v is not None]
        attrs[name] = values[0] if values else True
    return attrs


def _search_outside_comments(pattern, text: str, pos: int):
    """Find the next match of a tag pattern that is not inside an HTML comment

    Returns:
        Match object, or None when no further tag exists
    """
    while True:
        match = pattern.search(text, pos)
        if match is None:
            return None
        comment_start = text.find("<!--", pos, match.start())
        if comment_start == -1:
            return match
        comment_end = text.find("-->", comment_start + 4)
        if comment_end == -1:
            return None
        pos = comment_end + 3


def parse_component(text: str) -> SFCDescriptor:
    """Split a single-file component into its top-level blocks

    Args:
        text: Full ``.vue`` file contents

    Returns:
        Descriptor with template, script(s), styles and custom blocks.
        When several plain ``<script>`` blocks exist the last one wins.
    """
    descriptor = SFCDescriptor()
    pos = 0

    while True:
        opening = _search_outside_comments(_TAG_RE, text, pos)
        if opening is None:
            break
        is_closing, tag, attr_text, self_closing = opening.groups()
        if is_closing:
            # Stray closing tag at top level
            pos = opening.end()
            continue

        content_start = opening.end()
        if self_closing:
            block = SFCBlock(tag, "", parse_attrs(attr_text), content_start, content_start)
            _attach(descriptor, block)
            pos = content_start
            continue

        content_end, after = _find_block_end(text, tag, content_start)
        block = SFCBlock(
            tag,
            text[content_start:content_end],
            parse_attrs(attr_text),
            content_start,
            content_end,
        )
        _attach(descriptor, block)
        pos = after

    return descriptor


def _find_block_end(text: str, tag: str, start: int):
    """Locate the closing tag of a top-level block

    Returns:
        (content_end, position_after_closing_tag); an unclosed block runs
        to the end of the file
    """
    if tag in _RAW_TEXT_BLOCKS:
        closing = re.compile(rf"</{tag}\s*>", re.IGNORECASE).search(text, start)
        if closing is None:
            return len(text), len(text)
        return closing.start(), closing.end()

    depth = 1
    same_tag = re.compile(rf"<(/?){re.escape(tag)}(?:\s[^>]*?)?\s*(/?)>")
    pos = start
    while True:
        match = _search_outside_comments(same_tag, text, pos)
        if match is None:
            return len(text), len(text)
        if match.group(1):
            depth -= 1
            if depth == 0:
                return match.start(), match.end()
        elif not match.group(2):
            depth += 1
        pos = match.end()


def _attach(descriptor: SFCDescriptor, block: SFCBlock) -> None:
    if block.type == "template":
        if descriptor.template is None:
            descriptor.template = block
    elif block.type == "script":
        if block.is_setup:
            descriptor.script_setup = block
        else:
            descriptor.script = block
    elif block.type == "style":
        descriptor.styles.append(block)
    else:
        descriptor.custom_blocks.append(block)


class VueFrontend(ScriptFrontend):
    """Front-end for ``.vue`` files"""

    name = "vue"

    def extract_script(self, text: str) -> Optional[str]:
        """Return the script block content

        The plain ``<script>`` block is used; a component with only
        ``<script setup>`` falls back to that block.
        """
        descriptor = parse_component(text)
        block = descriptor.script or descriptor.script_setup
        if block is None or not block.content:
            return None
        return block.content
