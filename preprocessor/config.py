"""Preprocessor configuration loading and strict validation."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List
import yaml

from preprocessor.exceptions import ValidationError, ConfigValidationError


@dataclass
class PreprocessorConfig:
    """Settings for a preprocessing run."""
    output_suffix: str = ".out"
    encoding: str = "utf-8"
    report: bool = False

    def output_path_for(self, input_path: Path) -> Path:
        """Derive the output path by appending the suffix to the input name."""
        return input_path.with_name(input_path.name + self.output_suffix)


class ConfigLoader:
    """Loads and validates a YAML config file with unknown-field rejection."""

    KNOWN_FIELDS = {'output_suffix', 'encoding', 'report'}

    def __init__(self):
        self.errors: List[ValidationError] = []

    def load(self, config_path: Path) -> PreprocessorConfig:
        """Load and validate config YAML."""
        self.errors = []
        try:
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f)
        except Exception as e:
            self._add_error(f"Failed to load config: {e}")
            self._raise_validation_errors()

        # An empty file means all defaults
        if data is None:
            return PreprocessorConfig()

        if not isinstance(data, dict):
            self._add_error("Config must be a YAML object/dictionary")
            self._raise_validation_errors()

        config = self._validate(data)

        if self.errors:
            self._raise_validation_errors()

        return config

    def _validate(self, data: Dict[str, Any]) -> PreprocessorConfig:
        config = PreprocessorConfig()

        for key in data.keys():
            if key not in self.KNOWN_FIELDS:
                self._add_error(f"Unknown field '{key}'", key)

        if 'output_suffix' in data:
            suffix = data['output_suffix']
            if not isinstance(suffix, str) or not suffix:
                self._add_error("'output_suffix' must be a non-empty string", 'output_suffix')
            elif '/' in suffix or '\\' in suffix:
                self._add_error("'output_suffix' must not contain path separators", 'output_suffix')
            else:
                config.output_suffix = suffix

        if 'encoding' in data:
            encoding = data['encoding']
            if not isinstance(encoding, str) or not encoding:
                self._add_error("'encoding' must be a non-empty string", 'encoding')
            else:
                try:
                    ''.encode(encoding)
                except LookupError:
                    self._add_error(f"Unknown encoding '{encoding}'", 'encoding')
                else:
                    config.encoding = encoding

        if 'report' in data:
            report = data['report']
            if not isinstance(report, bool):
                self._add_error(f"'report' must be a boolean, got {type(report).__name__}", 'report')
            else:
                config.report = report

        return config

    def _add_error(self, message: str, path: str = ""):
        self.errors.append(ValidationError(message=message, path=path))

    def _raise_validation_errors(self):
        raise ConfigValidationError(self.errors)
