"""React component generator

Wraps the global code block in a ``useEffect`` hook with an empty
dependency list, so it runs once after the component mounts.
"""

from multitranspile.generators.base import splice, void_return


class ReactGenerator:
    """Generates React function components (.jsx / .tsx)"""

    def generate(self, global_code: str, is_typescript: bool) -> str:
        """Generate a React component

        Args:
            global_code: Global code block
            is_typescript: Emit TSX annotations

        Returns:
            Component source

        Output example (file.tsx):
            import React, { useEffect } from 'react';

            function MyComponent(): JSX.Element {
              useEffect((): void => {
                console.log(window.location.href);
              }, []);

              return <div>My Component</div>;
            }

            export default MyComponent;
        """
        return_type = ": JSX.Element" if is_typescript else ""
        lines = [
            "import React, { useEffect } from 'react';",
            "",
            f"function MyComponent(){return_type} {{",
            f"  useEffect((){void_return(is_typescript)} => {{",
            splice(global_code, "    "),
            "  }, []);",
            "",
            "  return <div>My Component</div>;",
            "}",
            "",
            "export default MyComponent;",
        ]
        return "\n".join(lines)
