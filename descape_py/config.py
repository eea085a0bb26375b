"""
Configuration handling for descape.

Settings live in a small JSON file with camelCase keys, e.g.

    {"extendedEscapes": true, "lenient": false}
"""

from dataclasses import dataclass, asdict, fields as dataclass_fields
from typing import Optional
import json
from pathlib import Path

DEFAULT_CONFIG_PATH = Path(__file__).parent / 'config.json'


def _snake_case(key: str) -> str:
    return ''.join(f'_{c.lower()}' if c.isupper() else c for c in key).lstrip('_')


def _camel_case(key: str) -> str:
    head, *rest = key.split('_')
    return head + ''.join(word.capitalize() for word in rest)


@dataclass
class Config:
    """Configuration options for the default escape table."""

    # Recognise \a, \v and \e in addition to the core escapes
    extended_escapes: bool = True

    # Keep unknown escapes as the escaped character instead of failing
    lenient: bool = False

    @classmethod
    def load(cls, path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from a JSON file.

        Missing files give the defaults; unknown keys are ignored.
        """
        path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
        if not path.exists():
            return cls()

        with open(path, 'r') as f:
            data = json.load(f)

        valid_fields = {f.name for f in dataclass_fields(cls)}
        options = {}
        for key, value in data.items():
            name = _snake_case(key)
            if name in valid_fields:
                options[name] = value

        return cls(**options)

    def save(self, path: Path) -> None:
        """Save configuration to a JSON file."""
        data = {_camel_case(key): value for key, value in asdict(self).items()}
        with open(path, 'w') as f:
            json.dump(data, f, indent=2)
