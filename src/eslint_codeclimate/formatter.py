"""Render Code Climate reports the way an ESLint formatter would."""

import json
import re
from collections.abc import Iterable

from pydantic import TypeAdapter

from eslint_codeclimate.core.mapper import to_codeclimate
from eslint_codeclimate.models import Issue, LintResult, LintResultData

_ISSUES = TypeAdapter(list[Issue])
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _escape_surrogate(match: re.Match[str]) -> str:
    return f"\\u{ord(match.group()):04x}"


def render_issues(issues: list[Issue]) -> str:
    """Render *issues* as two-space indented JSON followed by a newline.

    Lone surrogates cannot be encoded as UTF-8, so they are written as
    ``\\uXXXX`` escapes like ``JSON.stringify`` does.
    """
    data = _ISSUES.dump_python(issues, exclude_none=True)
    text = json.dumps(data, indent=2, ensure_ascii=False)
    return _LONE_SURROGATE.sub(_escape_surrogate, text) + "\n"


def format_report(results: Iterable[LintResult], data: LintResultData) -> str:
    """Convert *results* and render them as an indented JSON report.

    For programmatic use, call ``to_codeclimate`` instead.
    """
    return render_issues(to_codeclimate(results, data.rules_meta, data.cwd))
