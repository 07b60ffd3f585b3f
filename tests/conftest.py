"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from eslint_codeclimate.models import LintResult, RuleMetaData

_REPO_ROOT = Path(__file__).parent.parent

ROOT = "/project"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# ESLint report fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def issues_results() -> list[LintResult]:
    """Results as ESLint reports them for a debugger/console fixture and a file that fails to parse."""
    return [
        LintResult.model_validate(
            {
                "filePath": f"{ROOT}/fatal.js",
                "messages": [
                    {
                        "ruleId": None,
                        "fatal": True,
                        "severity": 2,
                        "message": "Parsing error: Unexpected token",
                        "line": 2,
                        "column": 1,
                    }
                ],
                "errorCount": 1,
            }
        ),
        LintResult.model_validate(
            {
                "filePath": f"{ROOT}/fixture.js",
                "messages": [
                    {
                        "ruleId": "no-debugger",
                        "severity": 1,
                        "message": "Unexpected 'debugger' statement.",
                        "line": 1,
                        "column": 1,
                        "nodeType": "DebuggerStatement",
                        "messageId": "unexpected",
                        "endLine": 1,
                        "endColumn": 9,
                    },
                    {
                        "ruleId": "no-console",
                        "severity": 2,
                        "message": "Unexpected console statement.",
                        "line": 2,
                        "column": 1,
                        "endLine": 2,
                        "endColumn": 12,
                    },
                ],
            }
        ),
    ]


@pytest.fixture
def rules_meta() -> dict[str, RuleMetaData]:
    return {
        "no-debugger": RuleMetaData.model_validate(
            {
                "type": "problem",
                "docs": {
                    "description": "Disallow the use of `debugger`",
                    "recommended": True,
                    "url": "https://eslint.org/docs/latest/rules/no-debugger",
                },
                "schema": [],
            }
        ),
        "no-console": RuleMetaData.model_validate(
            {
                "type": "suggestion",
                "docs": {
                    "description": "Disallow the use of `console`",
                    "url": "https://eslint.org/docs/latest/rules/no-console",
                },
            }
        ),
    }


@pytest.fixture
def root_path() -> str:
    return ROOT
