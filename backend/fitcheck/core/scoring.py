"""
Layout Scoring

Turns the issues found by the validation passes into a 0-100 score,
a pass/fail verdict and human-readable suggestions.
"""

from typing import Dict, List

from fitcheck.models.results import FitCheckResult, Issue, IssueType, Severity


MAX_SCORE = 100
SEVERITY_PENALTY: Dict[Severity, int] = {
    Severity.ERROR: 20,
    Severity.WARNING: 10,
}

# One remediation hint per issue type, in pass order.
TYPE_HINTS: Dict[IssueType, str] = {
    IssueType.OVERLAP: "Move overlapping furniture to create proper separation",
    IssueType.CLEARANCE: "Increase spacing between furniture for better circulation",
    IssueType.RELATIONSHIP: "Adjust distances between related pieces for a more usable arrangement",
    IssueType.ACCESSIBILITY: "Widen walkways by moving or removing the blocking furniture",
    IssueType.SAFETY: "Anchor tall, narrow furniture to the wall",
}


def count_by_severity(issues: List[Issue], severity: Severity) -> int:
    return sum(1 for issue in issues if issue.severity == severity)


def calculate_score(issues: List[Issue]) -> int:
    """
    Start at 100 and subtract 20 per error and 10 per warning.

    Returns:
        Score clamped to [0, 100]
    """
    score = MAX_SCORE - sum(SEVERITY_PENALTY[issue.severity] for issue in issues)
    return max(0, min(MAX_SCORE, score))


def generate_suggestions(issues: List[Issue]) -> List[str]:
    """Summary lines for errors and warnings, then hints per issue type present."""
    suggestions = []

    error_count = count_by_severity(issues, Severity.ERROR)
    warning_count = count_by_severity(issues, Severity.WARNING)

    if error_count > 0:
        suggestions.append(f"Fix {error_count} critical issue(s) before proceeding")

    if warning_count > 0:
        suggestions.append(f"Consider addressing {warning_count} layout optimization(s)")

    present = {issue.type for issue in issues}
    for issue_type, hint in TYPE_HINTS.items():
        if issue_type in present:
            suggestions.append(hint)

    return suggestions


def build_result(issues: List[Issue]) -> FitCheckResult:
    """Aggregate issues into the final FitCheckResult."""
    return FitCheckResult(
        passed=count_by_severity(issues, Severity.ERROR) == 0,
        issues=list(issues),
        score=calculate_score(issues),
        suggestions=generate_suggestions(issues),
    )
