from eslint_codeclimate.core.fingerprint import create_fingerprint
from eslint_codeclimate.core.mapper import to_codeclimate
from eslint_codeclimate.formatter import format_report, render_issues
from eslint_codeclimate.loader import LintReport, load_report, load_rules_meta, parse_report
from eslint_codeclimate.models import (
    Content,
    Issue,
    LineColumn,
    LintMessage,
    LintResult,
    LintResultData,
    Location,
    Positions,
    RuleDocs,
    RuleMetaData,
)

__all__ = [
    "Content",
    "Issue",
    "LineColumn",
    "LintMessage",
    "LintReport",
    "LintResult",
    "LintResultData",
    "Location",
    "Positions",
    "RuleDocs",
    "RuleMetaData",
    "create_fingerprint",
    "format_report",
    "load_report",
    "load_rules_meta",
    "parse_report",
    "render_issues",
    "to_codeclimate",
]
