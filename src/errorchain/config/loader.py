"""Resolve client options from a config file and the environment.

Sources, lowest precedence first:

1. ``DEFAULT_OPTIONS``.
2. One config file: the explicit path, else the file named by
   ``ERRORCHAIN_CONFIG``, else the first of :data:`CONFIG_FILE_NAMES` found in
   the search directory.
3. ``ERRORCHAIN_<FIELD>`` variables, laid over the file key by key.

A relative ``transport_path`` in a file is resolved against the file's own
directory, so the same file behaves the same from any working directory.

Shipped in this module
----------------------
- CONFIG_FILE_NAMES — file names searched for, in order
- ConfigLoader      — file discovery, parsing and layering
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from errorchain.config.defaults import DEFAULT_OPTIONS
from errorchain.config.schema import validate_options
from errorchain.schema.config import ClientOptions
from errorchain.schema.errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES: tuple[str, ...] = (
    "errorchain.yaml",
    "errorchain.yml",
    "errorchain.json",
    ".errorchain.yaml",
    ".errorchain.yml",
    ".errorchain.json",
)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class ConfigLoader:
    """Builds :class:`ClientOptions` for a client.

    Parameters
    ----------
    env_prefix:
        Prefix of the environment variables that override file values.
        ``<prefix>CONFIG`` names a config file to use instead of searching.

    Examples
    --------
    >>> ConfigLoader(env_prefix="UNUSED_PREFIX_").load_env().transport
    'null'
    """

    def __init__(self, env_prefix: str = "ERRORCHAIN_") -> None:
        self._env_prefix = env_prefix

    @property
    def env_prefix(self) -> str:
        return self._env_prefix

    @property
    def config_env_var(self) -> str:
        """Name of the variable that points at a config file."""
        return f"{self._env_prefix}CONFIG"

    def find_file(self, search_dir: str | Path | None = None) -> Path | None:
        """Return the config file :meth:`load` would read, if any.

        Raises
        ------
        ConfigurationError
            If the config file variable names a file that does not exist.
        """
        named = os.environ.get(self.config_env_var)
        if named:
            path = Path(named)
            if not path.is_file():
                raise ConfigurationError(
                    f"{self.config_env_var} points at a missing file: {path}",
                    context={"path": str(path), "variable": self.config_env_var},
                )
            return path

        base_dir = Path(search_dir) if search_dir is not None else Path.cwd()
        for name in CONFIG_FILE_NAMES:
            candidate = base_dir / name
            if candidate.is_file():
                return candidate
        return None

    def read_file(self, path: str | Path) -> dict[str, Any]:
        """Parse *path* into a raw option mapping without validating it.

        The format follows the suffix: ``.json`` is JSON, ``.yaml`` and
        ``.yml`` are YAML.  An empty YAML file is an empty mapping.

        Raises
        ------
        ConfigurationError
            If the file is missing, unreadable, has an unknown suffix, does
            not parse, or does not hold a mapping at the top level.
        """
        resolved = Path(path)
        context: dict[str, object] = {"path": str(resolved)}
        suffix = resolved.suffix.lower()
        if suffix != ".json" and suffix not in _YAML_SUFFIXES:
            raise ConfigurationError(
                f"Unsupported config file type {resolved.suffix!r}: {resolved}",
                context=context,
            )
        try:
            text = resolved.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(
                f"Cannot read config file {resolved}: {exc}", context=context
            ) from exc

        try:
            raw: object = json.loads(text) if suffix == ".json" else yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigurationError(
                f"Cannot parse config file {resolved}: {exc}", context=context
            ) from exc

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"Config file {resolved} must hold a mapping, not {type(raw).__name__}",
                context=context,
            )

        data = dict(raw)
        transport_path = data.get("transport_path")
        if isinstance(transport_path, str) and not Path(transport_path).is_absolute():
            data["transport_path"] = str(resolved.parent / transport_path)
        logger.debug("Read config file %s", resolved)
        return data

    def load_file(self, path: str | Path) -> ClientOptions:
        """Validate the options in *path*, without defaults or environment.

        Raises
        ------
        ConfigurationError
            If the file cannot be read or fails validation.
        """
        return self._validate(self.read_file(path), source=str(path))

    def load_env(self) -> ClientOptions:
        """Validate the options set in the environment alone.

        Raises
        ------
        ConfigurationError
            If an environment value fails validation.
        """
        return self._validate(
            ClientOptions.env_values(self._env_prefix),
            source=f"{self._env_prefix}* environment",
        )

    def load(
        self,
        path: str | Path | None = None,
        search_dir: str | Path | None = None,
    ) -> ClientOptions:
        """Resolve options from defaults, one config file and the environment.

        Parameters
        ----------
        path:
            Config file to read.  When omitted the file is discovered with
            :meth:`find_file`.
        search_dir:
            Directory searched when no file is named.  Defaults to the
            current working directory.

        Raises
        ------
        ConfigurationError
            If the chosen file or the combined values are invalid.  A broken
            file is reported rather than skipped.
        """
        config_file = Path(path) if path is not None else self.find_file(search_dir)
        data = DEFAULT_OPTIONS.model_dump()
        if config_file is None:
            logger.debug("No errorchain config file found; using defaults.")
        else:
            data.update(self.read_file(config_file))
            logger.info("Loaded errorchain config from %s", config_file)

        env_data = ClientOptions.env_values(self._env_prefix)
        if env_data:
            logger.debug("Environment overrides: %s", ", ".join(sorted(env_data)))
            data.update(env_data)

        return self._validate(data, source=str(config_file or "defaults"))

    def _validate(self, data: dict[str, Any], source: str) -> ClientOptions:
        try:
            return validate_options(data)
        except ConfigurationError as exc:
            raise ConfigurationError(
                f"Invalid errorchain options from {source}: {exc}",
                context={**exc.context, "source": source},
            ) from exc
