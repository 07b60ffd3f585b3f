import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from eslint_codeclimate.models import LintResult, RuleMetaData

logger = logging.getLogger(__name__)

_RESULTS = TypeAdapter(list[LintResult])
_RULES_META = TypeAdapter(dict[str, RuleMetaData])
_CWD = TypeAdapter(str | None)


@dataclass
class LintReport:
    results: list[LintResult]
    rules_meta: dict[str, RuleMetaData] = field(default_factory=dict)
    cwd: str | None = None


def parse_rules_meta(data: Any) -> dict[str, RuleMetaData]:
    if not isinstance(data, dict):
        raise ValueError(f"Rules metadata must be a JSON object, got {type(data).__name__}")
    # ESLint serializes rules without meta as null
    return _RULES_META.validate_python({k: v for k, v in data.items() if v is not None})


def parse_report(data: Any) -> LintReport:
    """Parse the output of ESLint's ``json`` or ``json-with-metadata`` formatter."""
    if isinstance(data, list):
        results = _RESULTS.validate_python(data)
        logger.debug("Detected plain ESLint JSON report with %d result(s)", len(results))
        return LintReport(results=results)

    if isinstance(data, dict) and "results" in data:
        metadata = data.get("metadata") or {}
        if not isinstance(metadata, dict):
            raise ValueError("Unsupported ESLint report: 'metadata' must be an object")
        results = _RESULTS.validate_python(data["results"])
        logger.debug("Detected ESLint JSON report with metadata (%d result(s))", len(results))
        return LintReport(
            results=results,
            rules_meta=parse_rules_meta(metadata.get("rulesMeta") or {}),
            cwd=_CWD.validate_python(metadata.get("cwd")),
        )

    raise ValueError(
        "Unsupported ESLint report. Expected the output of the 'json' or 'json-with-metadata' formatter."
    )


def _read_json(path: Path, kind: str) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"{kind} not found: {path}") from None
    return loads_json(text, f"{kind} {path}")


def loads_json(text: str, source: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {source}: {exc}") from exc


def load_report(path: Path) -> LintReport:
    return parse_report(_read_json(path, "Report"))


def load_rules_meta(path: Path) -> dict[str, RuleMetaData]:
    return parse_rules_meta(_read_json(path, "Rules metadata"))
