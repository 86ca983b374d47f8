"""Extraction logger for the global-reference extractor

Tracks which global references were kept, which were shadowed by a local
binding, and any warnings raised along the way (e.g. a component without a
script block). Nothing is printed here; the CLI prints the summary on
request.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass
class ReferenceRecord:
    """Free reference to a global identifier that was extracted"""
    name: str
    line: int
    column: int
    statement: str

    def format(self) -> str:
        first_line = self.statement.splitlines()[0] if self.statement else ""
        return f"  {self.name} at {self.line}:{self.column} -> {first_line}"


@dataclass
class ShadowRecord:
    """Reference to a global-looking name that resolved to a local binding"""
    name: str
    line: int
    binding_kind: Optional[str] = None
    binding_line: Optional[int] = None

    def format(self) -> str:
        details = []
        if self.binding_kind:
            details.append(self.binding_kind)
        if self.binding_line:
            details.append(f"declared at line {self.binding_line}")
        suffix = f" ({', '.join(details)})" if details else ""
        return f"  {self.name} at line {self.line} is local{suffix}"


class ExtractionLogger:
    """Logs extraction decisions and provides summaries"""

    def __init__(self) -> None:
        self.references: List[ReferenceRecord] = []
        self.shadowed: List[ShadowRecord] = []
        self.warnings: List[str] = []

    def log_reference(self, name: str, line: int, column: int, statement: str) -> None:
        """Log a kept global reference

        Args:
            name: Global identifier name
            line: 1-based line of the reference
            column: 1-based column of the reference
            statement: Printed text of the enclosing statement
        """
        self.references.append(ReferenceRecord(name, line, column, statement))

    def log_shadowed(
        self,
        name: str,
        line: int,
        binding_kind: Optional[str] = None,
        binding_line: Optional[int] = None,
    ) -> None:
        """Log a reference skipped because a local binding shadows it"""
        self.shadowed.append(ShadowRecord(name, line, binding_kind, binding_line))

    def log_warning(self, message: str) -> None:
        self.warnings.append(message)

    def get_summary(self) -> Dict:
        """Get summary statistics

        Returns:
            Dictionary with reference counts per identifier
        """
        by_name: Dict[str, int] = {}
        for record in self.references:
            by_name[record.name] = by_name.get(record.name, 0) + 1

        shadowed_by_name: Dict[str, int] = {}
        for record in self.shadowed:
            shadowed_by_name[record.name] = shadowed_by_name.get(record.name, 0) + 1

        statements = {record.statement for record in self.references}

        return {
            "total_references": len(self.references),
            "references_by_name": by_name,
            "total_statements": len(statements),
            "total_shadowed": len(self.shadowed),
            "shadowed_by_name": shadowed_by_name,
            "total_warnings": len(self.warnings),
        }

    def print_summary(self) -> str:
        """Generate formatted summary string

        Returns:
            Formatted summary as string
        """
        summary = self.get_summary()
        lines = []

        lines.append("=== Extraction Summary ===")
        lines.append(f"Global references: {summary['total_references']}")
        lines.append(f"Extracted statements: {summary['total_statements']}")
        lines.append("")

        if summary['references_by_name']:
            lines.append("References by identifier:")
            for name, count in sorted(summary['references_by_name'].items()):
                lines.append(f"  {name}: {count}")
            lines.append("")

        if self.references:
            lines.append("Reference details (top 10):")
            for record in self.references[:10]:
                lines.append(record.format())
            lines.append("")

        lines.append(f"Shadowed references: {summary['total_shadowed']}")
        if self.shadowed:
            for record in self.shadowed[:10]:
                lines.append(record.format())
            lines.append("")

        lines.append(f"Warnings: {summary['total_warnings']}")
        for warning in self.warnings:
            lines.append(f"  {warning}")

        return "\n".join(lines)

    def get_extracted_names(self) -> List[str]:
        """Get global names that produced at least one extraction, in first-seen order"""
        seen: List[str] = []
        for record in self.references:
            if record.name not in seen:
                seen.append(record.name)
        return seen
