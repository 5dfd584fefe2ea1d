"""Configuration management for Filipino Dama."""

import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .rules import CapturePriority, RulesConfig

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory."""
    # Use XDG on Linux/WSL, or fallback
    if os.name == 'nt':
        config_base = Path(os.environ.get('APPDATA', Path.home() / 'AppData' / 'Roaming'))
    else:
        config_base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))

    return config_base / 'dama'


def get_config_file() -> Path:
    """Get the configuration file path."""
    return get_config_dir() / 'settings.yaml'


@dataclass
class RuleSettings:
    """Game rule settings."""
    board_size: int = 8
    mandatory_capture: bool = True
    flying_kings: bool = True  # Kings move and capture any distance along a diagonal
    men_capture_backward: bool = True
    capture_priority: str = "any"  # any, max
    promote_mid_turn: bool = False

    def to_rules_config(self) -> RulesConfig:
        """Build the immutable ruleset used by the engine."""
        return RulesConfig(
            board_size=self.board_size,
            mandatory_capture=self.mandatory_capture,
            flying_kings=self.flying_kings,
            men_capture_backward=self.men_capture_backward,
            capture_priority=CapturePriority(self.capture_priority),
            promote_mid_turn=self.promote_mid_turn,
        )


@dataclass
class AISettings:
    """Computer opponent settings."""
    black_difficulty: str = "medium"  # easy, medium, hard
    red_difficulty: str = "medium"
    seed: Optional[int] = None  # None = different games every run


@dataclass
class LogSettings:
    """Logging settings."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Main configuration class."""
    rules: RuleSettings = field(default_factory=RuleSettings)
    ai: AISettings = field(default_factory=AISettings)
    log: LogSettings = field(default_factory=LogSettings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'rules': asdict(self.rules),
            'ai': asdict(self.ai),
            'log': asdict(self.log),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        config = cls()

        if 'rules' in data:
            config.rules = RuleSettings(**data['rules'])
        if 'ai' in data:
            config.ai = AISettings(**data['ai'])
        if 'log' in data:
            config.log = LogSettings(**data['log'])

        return config

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = get_config_file()

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from file, falling back to defaults."""
        if path is None:
            path = get_config_file()

        if not path.exists():
            return cls()

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
            if data is None:
                return cls()
            config = cls.from_dict(data)
            # Fail here rather than on first use of the ruleset
            config.rules.to_rules_config()
            return config
        except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
            logger.warning("Failed to load config from %s: %s", path, e)
            return cls()


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def save_config() -> None:
    """Save the global configuration."""
    if _config is not None:
        _config.save()


def reset_config() -> Config:
    """Reset configuration to defaults."""
    global _config
    _config = Config()
    _config.save()
    return _config
