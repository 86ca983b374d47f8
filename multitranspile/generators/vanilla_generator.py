"""Plain script generators (no framework)

Modern output wraps the block in an arrow-function IIFE; the legacy target
uses a ``function`` expression so the wrapper itself is ES5 syntax. The
block is spliced unchanged in both cases.
"""

from multitranspile.generators.base import void_return


class VanillaGenerator:
    """Generates ``file.js`` / ``file.ts``"""

    def generate(self, global_code: str, is_typescript: bool) -> str:
        return f"((){void_return(is_typescript)} => {{\n{global_code}\n}})();"


class VanillaES5Generator:
    """Generates ``file.es5.js``"""

    def generate(self, global_code: str, is_typescript: bool = False) -> str:
        if is_typescript:
            raise ValueError("ES5 output is generated in JavaScript only")
        return f"(function() {{\n{global_code}\n}})();"
