import logging
import os
from collections.abc import Iterable, Mapping

from eslint_codeclimate.core.fingerprint import create_fingerprint
from eslint_codeclimate.models import (
    Content,
    Issue,
    LineColumn,
    LintMessage,
    LintResult,
    Location,
    Positions,
    RuleMetaData,
    Severity,
)

logger = logging.getLogger(__name__)

BUG_RISK = "Bug Risk"
STYLE = "Style"

_PROBLEM_TYPE = "problem"
_ESLINT_ERROR = 2


def message_severity(message: LintMessage) -> Severity:
    if message.fatal:
        return "critical"
    if message.severity == _ESLINT_ERROR:
        return "major"
    return "minor"


def message_categories(meta: RuleMetaData | None) -> list[str]:
    if meta is not None and meta.type == _PROBLEM_TYPE:
        return [BUG_RISK, STYLE]
    return [STYLE]


def message_content(rule_id: str | None, meta: RuleMetaData | None) -> Content | None:
    """Build the issue body from the rule description and a link to its docs."""
    if not rule_id or meta is None or meta.docs is None:
        return None

    body = meta.docs.description or ""
    if meta.docs.url:
        if body:
            body += "\n\n"
        body += f"[{rule_id}]({meta.docs.url})"

    return Content(body=body) if body else None


def message_location(path: str, message: LintMessage) -> Location:
    end_line = message.end_line if message.end_line is not None else message.line
    end_column = message.end_column if message.end_column is not None else message.column
    return Location(
        path=path,
        positions=Positions(
            begin=LineColumn(line=message.line, column=message.column),
            end=LineColumn(line=end_line, column=end_column),
        ),
    )


def to_codeclimate(
    results: Iterable[LintResult],
    rules_meta: Mapping[str, RuleMetaData],
    cwd: str,
) -> list[Issue]:
    """Convert ESLint results to Code Climate issues.

    Issues keep the order of *results* and of the messages within each result.
    File paths are made relative to *cwd*. Every call uses its own fingerprint
    registry, so independent calls on the same input return identical issues.
    """
    issues: list[Issue] = []
    hashes: set[str] = set()
    result_count = 0

    for result in results:
        result_count += 1
        relative_path = os.path.relpath(result.file_path, cwd)

        for message in result.messages:
            meta = rules_meta.get(message.rule_id) if message.rule_id else None
            issues.append(
                Issue(
                    categories=message_categories(meta),
                    check_name=message.rule_id or "",
                    description=message.message,
                    severity=message_severity(message),
                    fingerprint=create_fingerprint(relative_path, message, hashes),
                    location=message_location(relative_path, message),
                    content=message_content(message.rule_id, meta),
                )
            )

    logger.debug("Converted %d message(s) from %d result(s)", len(issues), result_count)
    return issues
