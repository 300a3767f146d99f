import pytest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def shipped_config_path():
    return str(REPO_ROOT / "configs" / "watch_rewards" / "config.yaml")


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "default:\n"
        "  watch_rewards:\n"
        "    interval_ms: 50\n"
        "    step_value: 0.5\n"
        "    symbol: ''\n"
        "  ui:\n"
        "    refresh_secs: 0.25\n"
        "live:\n"
        "  watch_rewards:\n"
        "    symbol: '€'\n"
        "  extra: true\n",
        encoding="utf-8",
    )
    return str(path)
