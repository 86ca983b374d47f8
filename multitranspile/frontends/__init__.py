"""Input front-ends

Maps file extensions to the front-end that extracts their script text, and
parses that text with the shared TSX parser.
"""

from typing import Dict, Optional

from multitranspile.core.errors import UnsupportedFormatError
from multitranspile.frontends.base import ScriptFrontend
from multitranspile.frontends.parser import ParsedScript, ScriptParser
from multitranspile.frontends.script import PlainScriptFrontend
from multitranspile.frontends.svelte import SvelteFrontend
from multitranspile.frontends.vue import VueFrontend

FRONTENDS: Dict[str, ScriptFrontend] = {
    ".js": PlainScriptFrontend(),
    ".jsx": PlainScriptFrontend(),
    ".ts": PlainScriptFrontend(),
    ".tsx": PlainScriptFrontend(),
    ".vue": VueFrontend(),
    ".svelte": SvelteFrontend(),
}

SUPPORTED_EXTENSIONS = tuple(FRONTENDS)


def get_frontend(extension: str) -> ScriptFrontend:
    """Get the front-end for a file extension

    Args:
        extension: Extension including the dot (case-insensitive)

    Returns:
        Matching front-end

    Raises:
        UnsupportedFormatError: If no front-end handles the extension
    """
    frontend = FRONTENDS.get(extension.lower())
    if frontend is None:
        raise UnsupportedFormatError(extension)
    return frontend


def parse_source(
    text: str,
    extension: str,
    parser: Optional[ScriptParser] = None,
) -> Optional[ParsedScript]:
    """Extract and parse the script of a file

    Args:
        text: File contents
        extension: File extension selecting the front-end
        parser: Parser to reuse (a new one is created if omitted)

    Returns:
        Parsed script, or None when the file holds no script

    Raises:
        UnsupportedFormatError: Unknown extension
        ScriptParseError: Malformed script
    """
    frontend = get_frontend(extension)
    script = frontend.extract_script(text)
    if script is None:
        return None
    return (parser or ScriptParser()).parse(script)


__all__ = [
    'FRONTENDS',
    'SUPPORTED_EXTENSIONS',
    'ParsedScript',
    'ScriptFrontend',
    'ScriptParser',
    'get_frontend',
    'parse_source',
]
