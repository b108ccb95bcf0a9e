"""
This module contains all the general optimizer settings.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class SettingsFile(BaseModel):
    """Keys accepted in a YAML configuration file."""

    model_config = ConfigDict(extra="forbid")

    output: Optional[str] = None
    rename: Optional[bool] = None
    obfuscate: Optional[bool] = None
    obfuscator_command: Optional[List[str]] = None
    obfuscator_options: Optional[Dict[str, Any]] = None
    html_minify_options: Optional[Dict[str, Any]] = None
    mapping_sample_size: Optional[int] = None
    log_level: Optional[str] = None
    log_to_file: Optional[bool] = None
    log_file: Optional[str] = None


class Settings:
    """
    Configuration settings for the HTML optimizer.

    Attributes:
        APP_NAME (str): Name of the tool, also the logger name.
        CONFIG_FILE (str): Default configuration file looked up in the working directory.
        OUTPUT_FILE (str): Output path used when none is given on the command line.
        RENAME (bool): Toggle class/id renaming.
        OBFUSCATE (bool): Obfuscate inline scripts; when off they are only minified.
        OBFUSCATOR_COMMAND (list): Command line of the JavaScript obfuscator.
        OBFUSCATOR_OPTIONS (dict): Options passed to the obfuscator for every block.
        HTML_MINIFY_OPTIONS (dict): Options for the final whole-document pass.
        MAPPING_SAMPLE_SIZE (int): Number of rename entries printed after a run.
        LOG_LEVEL (str): Minimum level of the console logger.
        LOG_TO_FILE (bool): Toggle logging to file feature.
        LOG_FILE_ROOT (str): Path of the log file.
    """

    # Application Configuration
    APP_NAME = "htmlsqueeze"
    CONFIG_FILE = "htmlsqueeze.yml"

    # Pipeline Configuration
    OUTPUT_FILE = "index.min.html"
    RENAME = True
    OBFUSCATE = True
    MAPPING_SAMPLE_SIZE = 10

    # JavaScript Obfuscator Configuration
    OBFUSCATOR_COMMAND = os.environ.get(
        "HTMLSQUEEZE_OBFUSCATOR", "javascript-obfuscator"
    ).split()
    OBFUSCATOR_OPTIONS = {
        "compact": True,
        "control-flow-flattening": False,
        "dead-code-injection": False,
        "string-array": True,
        "string-array-encoding": ["base64"],
        "string-array-threshold": 0.75,
        "transform-object-keys": True,
    }

    # Final HTML Pass Configuration
    # Inline styles and scripts are already minified, so they are kept as-is.
    HTML_MINIFY_OPTIONS = {
        "remove_comments": True,
        "remove_empty_space": True,
        "reduce_empty_attributes": False,
        "reduce_boolean_attributes": False,
        "remove_optional_attribute_quotes": False,
        "keep_pre": False,
        "pre_tags": ("pre", "textarea", "script", "style"),
    }

    # Logging Configuration
    LOG_LEVEL = os.environ.get("HTMLSQUEEZE_LOG_LEVEL", "INFO")
    LOG_TO_FILE = "HTMLSQUEEZE_LOG_FILE" in os.environ
    LOG_FILE_ROOT = os.environ.get("HTMLSQUEEZE_LOG_FILE", "log/htmlsqueeze.log")

    _FILE_KEYS = {
        "output": "OUTPUT_FILE",
        "rename": "RENAME",
        "obfuscate": "OBFUSCATE",
        "obfuscator_command": "OBFUSCATOR_COMMAND",
        "obfuscator_options": "OBFUSCATOR_OPTIONS",
        "html_minify_options": "HTML_MINIFY_OPTIONS",
        "mapping_sample_size": "MAPPING_SAMPLE_SIZE",
        "log_level": "LOG_LEVEL",
        "log_to_file": "LOG_TO_FILE",
        "log_file": "LOG_FILE_ROOT",
    }

    @classmethod
    def config_path(cls, explicit: Optional[str] = None) -> Optional[Path]:
        """Return the configuration file to load, or ``None`` when there is none."""
        if explicit:
            return Path(explicit)
        env = os.environ.get("HTMLSQUEEZE_CONFIG")
        if env:
            return Path(env)
        default = Path(cls.CONFIG_FILE)
        return default if default.exists() else None

    @classmethod
    def load(cls, path: Optional[str] = None) -> Dict[str, Any]:
        """
        Apply the YAML configuration file on top of the defaults.

        Parameters:
            path (str): Explicit configuration file; falls back to
                ``HTMLSQUEEZE_CONFIG`` and then ``htmlsqueeze.yml``.

        Returns:
            dict: The setting names that were overridden and their new values.

        Raises:
            ConfigError: The file is missing, is not valid YAML or has unknown keys.
        """
        config_path = cls.config_path(path)
        if config_path is None:
            return {}
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except OSError as exc:
            raise ConfigError(f"cannot read config {config_path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(raw, dict):
            raise ConfigError(f"config {config_path} must be a mapping")
        try:
            parsed = SettingsFile.model_validate(raw)
        except ValidationError as exc:
            raise ConfigError(f"invalid config {config_path}: {exc}") from exc

        applied = {}
        for key, value in parsed.model_dump(exclude_none=True).items():
            attr = cls._FILE_KEYS[key]
            setattr(cls, attr, value)
            applied[attr] = value
        return applied
