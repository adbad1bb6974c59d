from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "allowed_review_for": "",  # comma-separated logins whose PRs may be approved
    "review_as": None,  # login of the approving identity; must be a requested reviewer
}


def load_config(config_path: str = ".autoapprove.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .autoapprove.yml in the current directory
      3. CLI argument overrides
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    # The YAML file may list logins instead of giving a comma-separated string.
    allowed = config.get("allowed_review_for")
    if isinstance(allowed, (list, tuple)):
        config["allowed_review_for"] = ",".join(str(login) for login in allowed if login is not None)
    elif allowed is None:
        config["allowed_review_for"] = ""
    else:
        config["allowed_review_for"] = str(allowed)

    # Logins such as 123 come out of YAML as ints.
    if config.get("review_as") is not None:
        config["review_as"] = str(config["review_as"])

    return config
