"""
Report generation for the string literal finder.
"""

from deps import Dict, List

from .issue import AnalysisErrorFixes, Severity


class ReportGenerator:
    """Generate reports from diagnostics."""

    @staticmethod
    def generate_text_report(errors: List[AnalysisErrorFixes], file_path: str) -> str:
        """Generate a text report."""
        if not errors:
            return f"\n✓ No string literals to localize in {file_path}\n"

        report = [f"\n{'='*80}"]
        report.append(f"String Literal Report: {file_path}")
        report.append(f"{'='*80}\n")

        for severity in Severity:
            group = [e for e in errors if e.error.severity == severity]
            if not group:
                continue
            report.append(f"{severity.value}S ({len(group)}):")
            report.append("-" * 80)
            for item in group:
                error = item.error
                report.append(
                    f"  Line {error.location.start_line}:{error.location.start_column}: {error.message}"
                )
                report.append(f"    Code: {error.code}")
                report.append(f"    Fix: {error.correction}")
                for fix in item.fixes:
                    report.append(f"      [{fix.priority}] {fix.change.message}")
                report.append("")

        summary = ReportGenerator.generate_summary(errors)
        counts = ", ".join(f"{count} {code}" for code, count in summary.items())
        report.append(f"\nSummary: {counts}")
        report.append("="*80)

        return "\n".join(report)

    @staticmethod
    def generate_summary(errors: List[AnalysisErrorFixes]) -> Dict[str, int]:
        """Generate a summary count by error code."""
        summary = {}
        for item in errors:
            summary[item.error.code] = summary.get(item.error.code, 0) + 1
        return summary
