from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["info", "minor", "major", "critical", "blocker"]


class _EslintModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class LintMessage(_EslintModel):
    rule_id: str | None = Field(default=None, alias="ruleId")
    message: str
    severity: int = 1
    fatal: bool | None = None
    # ESLint omits positions for "File ignored ..." warnings
    line: int | None = None
    column: int | None = None
    end_line: int | None = Field(default=None, alias="endLine")
    end_column: int | None = Field(default=None, alias="endColumn")


class LintResult(_EslintModel):
    file_path: str = Field(alias="filePath")
    messages: list[LintMessage] = Field(default_factory=list)


class RuleDocs(_EslintModel):
    description: str | None = None
    url: str | None = None


class RuleMetaData(_EslintModel):
    type: str | None = None
    docs: RuleDocs | None = None


class LintResultData(_EslintModel):
    rules_meta: dict[str, RuleMetaData] = Field(default_factory=dict, alias="rulesMeta")
    cwd: str


class LineColumn(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int | None = None
    column: int | None = None


class Positions(BaseModel):
    model_config = ConfigDict(frozen=True)

    begin: LineColumn
    end: LineColumn


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    positions: Positions


class Content(BaseModel):
    model_config = ConfigDict(frozen=True)

    body: str


class Issue(BaseModel):
    """A Code Climate issue; field order is the serialized key order."""

    model_config = ConfigDict(frozen=True)

    type: Literal["issue"] = "issue"
    categories: list[str]
    check_name: str
    description: str
    severity: Severity
    fingerprint: str
    location: Location
    content: Content | None = None
