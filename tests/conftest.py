from pathlib import Path

import pytest

from solid_examples.rules import Rules, load_rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """Path to the bundled rules.yaml."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    return load_rules(rules_path)


@pytest.fixture
def write_rules(tmp_path):
    """Write rules text to a temp file and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "rules.yaml"
        path.write_text(content)
        return path

    return _write
