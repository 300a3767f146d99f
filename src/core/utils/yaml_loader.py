import os

import yaml


def load_yaml(path):
    if not os.path.exists(path):
        raise FileNotFoundError(f"❌ YAML file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"❌ Failed to parse YAML file {path}: {e}")
    # An empty document loads as None
    return data or {}
