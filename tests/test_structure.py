"""
Structure tests.

Every principle component follows the same package layout.
"""

from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
COMPONENTS = PROJECT_ROOT / "solid_examples" / "components"
PRINCIPLES = ["srp", "ocp", "lsp", "isp", "dip"]


class TestProjectStructure:
    def test_rules_file_exists(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()

    @pytest.mark.parametrize("principle", PRINCIPLES)
    def test_component_layout(self, principle: str) -> None:
        """Each component has models, ports, violation, component and tests."""
        component = COMPONENTS / principle
        for name in ("__init__.py", "models.py", "ports.py", "violation.py", "component.py"):
            assert (component / name).is_file(), f"Missing {name} in {principle}"
        assert (component / "tests" / "test_unit.py").is_file()
