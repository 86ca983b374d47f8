"""Angular component generator (TypeScript only)"""

from multitranspile.generators.base import splice

SELECTOR = "app-my-component"


class AngularGenerator:
    """Generates a decorated component class implementing ``OnInit``"""

    def __init__(self, selector: str = SELECTOR) -> None:
        self.selector = selector

    def generate(self, global_code: str, is_typescript: bool = True) -> str:
        """Generate an Angular component

        Args:
            global_code: Global code block
            is_typescript: Angular output is always TypeScript; must be True

        Returns:
            Component source (my-component.component.ts)
        """
        if not is_typescript:
            raise ValueError("Angular components are generated in TypeScript only")
        lines = [
            "import { Component, OnInit } from '@angular/core';",
            "",
            "@Component({",
            f"  selector: '{self.selector}',",
            "  template: `",
            "    <div>My Component</div>",
            "  `,",
            "})",
            "export class MyComponent implements OnInit {",
            "  ngOnInit(): void {",
            splice(global_code, "    "),
            "  }",
            "}",
        ]
        return "\n".join(lines)
