"""Svelte component front-end

The script region is found with a first-match of an opening/closing
``<script>`` tag pair, not with a grammar. Known limitation: with several
script blocks (e.g. ``context="module"`` plus the instance script) only the
first is read, and script-like text inside comments or strings is matched
as if it were a tag.
"""

import re
from typing import Optional

from multitranspile.frontends.base import ScriptFrontend

SCRIPT_RE = re.compile(r"<script[^>]*>(.*?)</script>", re.DOTALL)


class SvelteFrontend(ScriptFrontend):
    """Front-end for ``.svelte`` files"""

    name = "svelte"

    def extract_script(self, text: str) -> Optional[str]:
        match = SCRIPT_RE.search(text)
        if match is None or not match.group(1):
            return None
        return match.group(1)
