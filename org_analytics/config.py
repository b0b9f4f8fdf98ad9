"""Analytics configuration and environment setup."""

import dataclasses
from dataclasses import dataclass
from pathlib import Path

from org_analytics.hr.compensation import DEFAULT_MAXIMUM_PERCENTAGE, DEFAULT_MINIMUM_PERCENTAGE
from org_analytics.hr.reporting_lines import DEFAULT_REPORTING_LINES_THRESHOLD
from org_analytics.utils.io import FilePath, load_toml_config, load_yaml_config

type ConfigDict = dict[str, str | int | bool | dict]

DEFAULT_SAMPLE_DATA_CSV = "SampleData.csv"


@dataclass(frozen=True)
class SourceConfig:
    path: Path
    has_header: bool = True


@dataclass(frozen=True)
class SalaryPolicyConfig:
    min_percent: int = DEFAULT_MINIMUM_PERCENTAGE
    max_percent: int = DEFAULT_MAXIMUM_PERCENTAGE


@dataclass(frozen=True)
class ReportingLinesConfig:
    threshold: int = DEFAULT_REPORTING_LINES_THRESHOLD


@dataclass(frozen=True)
class AnalyticsConfig:
    source: SourceConfig
    salary_policy: SalaryPolicyConfig
    reporting_lines: ReportingLinesConfig


def _as_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.strip().lower() != "false"
    return bool(value)


def load_analytics_config(env: str = "production") -> AnalyticsConfig:
    match env:
        case "production":
            source = SourceConfig(path=Path(DEFAULT_SAMPLE_DATA_CSV))
            reporting = ReportingLinesConfig()
        case "staging":
            source = SourceConfig(path=Path("data/staging") / DEFAULT_SAMPLE_DATA_CSV)
            reporting = ReportingLinesConfig()
        case "development":
            source = SourceConfig(path=Path("data/dev") / DEFAULT_SAMPLE_DATA_CSV)
            reporting = ReportingLinesConfig(threshold=2)
        case other:
            raise ValueError(f"Unknown environment: {other}")

    return AnalyticsConfig(
        source=source,
        salary_policy=SalaryPolicyConfig(),
        reporting_lines=reporting,
    )


def apply_overrides(config: AnalyticsConfig, overrides: ConfigDict) -> AnalyticsConfig:
    """Return *config* with values from a ``source``/``salary_policy``/``reporting_lines`` mapping."""
    source = config.source
    if src := overrides.get("source"):
        source = dataclasses.replace(
            source,
            path=Path(src.get("path", source.path)),
            has_header=_as_bool(src.get("has_header", source.has_header)),
        )

    policy = config.salary_policy
    if pol := overrides.get("salary_policy"):
        policy = dataclasses.replace(
            policy,
            min_percent=int(pol.get("min_percent", policy.min_percent)),
            max_percent=int(pol.get("max_percent", policy.max_percent)),
        )

    lines = config.reporting_lines
    if rl := overrides.get("reporting_lines"):
        lines = dataclasses.replace(lines, threshold=int(rl.get("threshold", lines.threshold)))

    return AnalyticsConfig(source=source, salary_policy=policy, reporting_lines=lines)


def get_env_config(pyproject: FilePath | None = None) -> ConfigDict:
    """Read analytics config from pyproject.toml."""
    pyproject = Path(pyproject) if pyproject else Path(__file__).parent.parent / "pyproject.toml"
    if not pyproject.exists():
        return {}
    return load_toml_config(pyproject).get("tool", {}).get("org_analytics", {})


def load_config_file(path: FilePath) -> ConfigDict:
    """Read an ``org_analytics.yaml`` override file."""
    return load_yaml_config(path)
