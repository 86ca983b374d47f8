"""Vue single-file component generator"""

from multitranspile.generators.base import splice, void_return


class VueGenerator:
    """Generates ``<script setup>`` components using ``onMounted``"""

    def generate(self, global_code: str, is_typescript: bool) -> str:
        """Generate a Vue component

        Args:
            global_code: Global code block
            is_typescript: Add ``lang="ts"`` and hook annotations

        Returns:
            Component source

        Output example (file.ts.vue):
            <template>
              <div>My Component</div>
            </template>

            <script setup lang="ts">
            import { onMounted } from 'vue';

            onMounted((): void => {
              console.log(window.location.href);
            });
            </script>
        """
        script_attrs = ' lang="ts"' if is_typescript else ""
        lines = [
            "<template>",
            "  <div>My Component</div>",
            "</template>",
            "",
            f"<script setup{script_attrs}>",
            "import { onMounted } from 'vue';",
            "",
            f"onMounted((){void_return(is_typescript)} => {{",
            splice(global_code, "  "),
            "});",
            "</script>",
        ]
        return "\n".join(lines)
