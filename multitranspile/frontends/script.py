"""Plain script front-end (.js, .jsx, .ts, .tsx)"""

from typing import Optional

from multitranspile.frontends.base import ScriptFrontend


class PlainScriptFrontend(ScriptFrontend):
    """The whole file is the script"""

    name = "script"

    def extract_script(self, text: str) -> Optional[str]:
        return text
