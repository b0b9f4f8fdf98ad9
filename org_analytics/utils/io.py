"""File I/O utilities for reading source data and configuration."""

import logging
import tomllib
from pathlib import Path

import pandas as pd
import yaml

from org_analytics.errors import RecordParseError, SourceReadError

type FilePath = str | Path

logger = logging.getLogger(__name__)

ENCODINGS = ("utf-8", "latin-1", "cp1252")


def read_csv_with_fallback(path: FilePath, **read_kwargs) -> pd.DataFrame:
    """Read a CSV file, trying each known encoding in turn."""
    path = Path(path)
    if not path.is_file():
        raise SourceReadError(f"File not found | Filepath: {path.parent} | Filename: {path.name}")

    for encoding in ENCODINGS:
        try:
            return pd.read_csv(path, encoding=encoding, **read_kwargs)
        except UnicodeDecodeError:
            logger.debug("Could not decode %s as %s", path.name, encoding)
            continue
        except pd.errors.EmptyDataError:
            return pd.DataFrame()
        except pd.errors.ParserError as exc:
            raise RecordParseError(f"Malformed CSV in {path.name}: {exc}") from exc
        except PermissionError as exc:
            raise SourceReadError(
                f"File reading not permitted | Filepath: {path.parent} | Filename: {path.name}"
            ) from exc
    raise SourceReadError(f"Could not decode {path}")


def load_toml_config(path: FilePath) -> dict:
    """Load a TOML configuration file using Python 3.11+ stdlib."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_yaml_config(path: FilePath) -> dict:
    with open(path) as f:
        return yaml.safe_load(f) or {}
