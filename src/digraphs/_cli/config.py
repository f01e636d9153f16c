"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from digraphs._demo import DEFAULT_CHAIN
from digraphs._graph import Representation


class ConfigError(Exception):
    """Error in digraphs configuration."""


@dataclass(slots=True, frozen=True)
class DigraphsConfig:
    """Configuration loaded from the ``[tool.digraphs]`` table of pyproject.toml."""

    chain: tuple[Representation, ...] = DEFAULT_CHAIN
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_chain(value: object) -> tuple[Representation, ...]:
    """Parse the conversion chain from config.

    Raises:
        ConfigError: If the value is not a list of representation names

    """
    if not isinstance(value, list):
        msg = "Invalid [tool.digraphs].chain: expected a list of representation names"
        raise ConfigError(msg)

    chain: list[Representation] = []
    for item in value:
        if not isinstance(item, str):
            msg = f"Invalid [tool.digraphs].chain entry {item!r}: expected string"
            raise ConfigError(msg)
        try:
            chain.append(Representation(item))
        except ValueError as e:
            choices = ", ".join(member.value for member in Representation)
            msg = f"Unknown representation '{item}' in [tool.digraphs].chain. Expected one of: {choices}"
            raise ConfigError(msg) from e
    return tuple(chain)


def load_config(pyproject_path: Path) -> DigraphsConfig:
    """Load and validate [tool.digraphs] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed DigraphsConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("digraphs", {})
    if not section:
        return DigraphsConfig(project_root=project_root)

    chain = DEFAULT_CHAIN
    if "chain" in section:
        chain = _parse_chain(section["chain"])

    return DigraphsConfig(chain=chain, project_root=project_root)


def get_config() -> DigraphsConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        DigraphsConfig (defaults if no pyproject.toml or no [tool.digraphs] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return DigraphsConfig()
    return load_config(pyproject_path)
