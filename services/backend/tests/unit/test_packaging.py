"""Unit tests for the declared package dependencies."""

import tomllib
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parents[4] / "pyproject.toml"


def _names(requirements: list[str]) -> set[str]:
    return {req.split(">")[0].split("[")[0].split("=")[0] for req in requirements}


class TestDependencies:
    """Runtime and test dependencies are declared where they are imported."""

    def setup_method(self):
        """Load the project table."""
        with PYPROJECT.open("rb") as f:
            self.project = tomllib.load(f)["project"]

    def test_dotenv_is_test_only(self):
        """python-dotenv is only imported by the test conftest."""
        assert "python-dotenv" not in _names(self.project["dependencies"])
        assert "python-dotenv" in _names(
            self.project["optional-dependencies"]["test"]
        )
