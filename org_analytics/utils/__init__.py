"""Shared utilities for org analytics."""

from org_analytics.utils.io import read_csv_with_fallback, load_toml_config, load_yaml_config
from org_analytics.utils.validators import validate_dataframe
from org_analytics.utils.types import RunStatus, ValidationOutcome
