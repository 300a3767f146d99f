from core.utils.yaml_loader import load_yaml

DEFAULT_CONFIG_PATH = "configs/watch_rewards/config.yaml"


def load_config(env="default", path=DEFAULT_CONFIG_PATH):
    """
    Load configuration from a single YAML file and merge `default` with `env` section.

    Nested mappings are merged one level deep, so an environment can
    override a single `watch_rewards` key without repeating the rest.

    Args:
        env (str): Environment key to merge with default (e.g. "local" or "demo")
        path (str): Path to the config.yaml file

    Returns:
        dict: Final config dictionary with merged settings
    """
    raw = load_yaml(path)

    default_cfg = raw.get("default", {}) or {}
    env_cfg = {}
    if env != "default":
        env_cfg = raw.get(env, {}) or {}

    merged = dict(default_cfg)
    for key, value in env_cfg.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged
