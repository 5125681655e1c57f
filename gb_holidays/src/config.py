"""Load and provide typed access to config.yaml."""

from pathlib import Path

import yaml

DEFAULTS = {
    "data": {
        "file": "data/uk_bank_holidays.tsv",
        "date_generated": None,
        "source": "https://www.gov.uk/bank-holidays",
    },
    "query": {
        "ymd": False,
    },
}


def load_config(path: Path | None = None) -> dict:
    """Load config.yaml and return as dict with defaults merged."""
    if path is None:
        path = package_root() / "config.yaml"
    with open(path, encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    # Section-level merge: keys missing from a section fall back to defaults
    for section, defaults in DEFAULTS.items():
        cfg[section] = {**defaults, **(cfg.get(section) or {})}

    date_generated = cfg["data"]["date_generated"]
    if date_generated is not None:
        # YAML reads an unquoted 2013-07-23 as a date
        cfg["data"]["date_generated"] = str(date_generated)

    return cfg


def package_root() -> Path:
    """Return the gb_holidays package directory."""
    return Path(__file__).parent.parent


def data_path(cfg: dict | None = None) -> Path:
    """Return the absolute path of the holiday data file named in the config."""
    if cfg is None:
        cfg = load_config()
    path = Path(cfg["data"]["file"])
    if not path.is_absolute():
        path = package_root() / path
    return path
