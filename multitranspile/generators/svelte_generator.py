"""Svelte component generator"""

from multitranspile.generators.base import splice, void_return


class SvelteGenerator:
    """Generates Svelte components using ``onMount``"""

    def generate(self, global_code: str, is_typescript: bool) -> str:
        """Generate a Svelte component

        Args:
            global_code: Global code block
            is_typescript: Add ``lang="ts"`` and hook annotations

        Returns:
            Component source
        """
        script_attrs = ' lang="ts"' if is_typescript else ""
        lines = [
            f"<script{script_attrs}>",
            "  import { onMount } from 'svelte';",
            "",
            f"  onMount((){void_return(is_typescript)} => {{",
            splice(global_code, "    "),
            "  });",
            "</script>",
            "",
            "<div>My Component</div>",
        ]
        return "\n".join(lines)
