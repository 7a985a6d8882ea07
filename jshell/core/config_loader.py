"""
jshell Configuration Loader

Settings come from the dataclass defaults below, optionally overridden
by a JSON file whose top-level objects match the sections ("shell",
"logging"). Every value is checked against the type of its default, so
a bad file is rejected at startup instead of failing later in a child.

Only the prompt, logging and the child exec-failure status are
configurable; parsing and process execution have no tunables.

Author: YSNRFD
Version: 1.0.0
"""

import json
from dataclasses import MISSING, dataclass, field, fields, is_dataclass, replace
from pathlib import Path
from typing import Any, Optional
import threading

from jshell.exceptions import ConfigError


def _check_type(key: str, value: Any, default: Any) -> None:
    """
    Raise ConfigError unless value has the type of the field's default.
    
    A None default accepts a string or None. Booleans are not accepted
    where an integer is expected.
    """
    if default is None:
        valid = value is None or isinstance(value, str)
    elif default is MISSING:
        valid = False
    elif isinstance(default, bool):
        valid = isinstance(value, bool)
    elif isinstance(default, int):
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, type(default))
    
    if not valid:
        expected = 'str or null' if default is None else type(default).__name__
        raise ConfigError(
            f"Invalid value for {key}: {value!r} (expected {expected})",
            key=key
        )


def _field_defaults(obj: Any) -> dict[str, Any]:
    return {f.name: f.default for f in fields(obj)} if is_dataclass(obj) else {}


@dataclass
class ShellConfig:
    """Prompt text and the status a child exits with when exec fails."""
    name: str = "jshell"
    prompt: str = ">> "
    show_context: bool = True
    exec_failure_status: int = 1


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = False
    use_colors: bool = True


@dataclass
class Config:
    """All shell settings, one attribute per JSON section."""
    shell: ShellConfig = field(default_factory=ShellConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Process-wide holder of the active Config.
    
    Starts out with the defaults. ``load`` replaces them with the
    contents of a file; a file that fails validation leaves the
    previous configuration in place.
    
    Example:
        >>> ConfigLoader().load('config.json').shell.prompt
        '>> '
    """
    
    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()
    
    def __new__(cls) -> 'ConfigLoader':
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
            return cls._instance
    
    def load(self, config_path: str) -> Config:
        """
        Read and validate a JSON configuration file.
        
        Args:
            config_path: Path of the file
        
        Returns:
            The new active Config
        
        Raises:
            ConfigError: The file is missing, unreadable, not a JSON
                object, or holds a value of the wrong type
        """
        path = Path(config_path)
        
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")
        
        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file: {e}")
        
        if not isinstance(data, dict):
            raise ConfigError("Configuration root must be a JSON object")
        
        self._config = self._parse_config(data)
        return self._config
    
    def _parse_config(self, data: dict[str, Any]) -> Config:
        """
        Build a Config from decoded JSON.
        
        Each top-level key names a section; keys a section does not
        define are ignored.
        """
        config = Config()
        
        for section in fields(Config):
            section_data = data.get(section.name)
            if section_data is None:
                continue
            if not isinstance(section_data, dict):
                raise ConfigError(
                    f"Section '{section.name}' must be a JSON object",
                    key=section.name
                )
            
            current = getattr(config, section.name)
            defaults = _field_defaults(current)
            values = {}
            for name, value in section_data.items():
                if name in defaults:
                    _check_type(f"{section.name}.{name}", value, defaults[name])
                    values[name] = value
            setattr(config, section.name, replace(current, **values))
        
        return config
    
    @property
    def config(self) -> Config:
        return self._config
    
    def set(self, key: str, value: Any) -> None:
        """
        Change one setting in memory, e.g. ``set('shell.prompt', '$ ')``.
        
        Raises:
            ConfigError: The dotted key names no setting, or value has
                the wrong type
        """
        *path, name = key.split('.')
        target: Any = self._config
        for part in path:
            if not is_dataclass(target) or part not in _field_defaults(target):
                raise ConfigError(f"Invalid configuration key: {key}", key=key)
            target = getattr(target, part)
        
        defaults = _field_defaults(target)
        if name not in defaults:
            raise ConfigError(f"Invalid configuration key: {key}", key=key)
        
        _check_type(key, value, defaults[name])
        setattr(target, name, value)
    
    def reset(self) -> None:
        """Drop any loaded configuration and go back to defaults."""
        self._config = Config()


def get_config() -> Config:
    """Return the active Config."""
    return ConfigLoader().config
