import json
import logging
import os
from sys import stderr

from typing import Any, Callable, Optional, Set

__read_keys: Set[str] = set()

# The logger helper depends on this module for its own settings, so this module logs on its own.
__log_handler = logging.StreamHandler(stderr)
__log_handler.setFormatter(logging.Formatter('[ %(asctime)s | %(levelname)s ] %(name)s: %(message)s'))

__env_logger = logging.Logger('environment',
                              level=logging.DEBUG if os.getenv('BLCTL_DEBUG', '').lower() in ('1', 'true')
                              else logging.INFO)
__env_logger.addHandler(__log_handler)


def env(key: str,
        default: Any = None,
        transform: Optional[Callable[[str], Any]] = None,
        env_type: Optional[str] = None,
        description: Optional[str] = None) -> Any:
    """ Read an environment variable, falling back to the default when it is not set.

        Each variable is logged (at debug level) the first time it is read. Secret values are never shown.
    """
    raw_value = os.getenv(key)
    value = default if raw_value is None else (transform(raw_value) if transform else raw_value)

    if key not in __read_keys:
        __read_keys.add(key)

        shown_value = '(hidden)' if (env_type == 'secret' and value) else json.dumps(value)
        label = f'{(env_type or "env").upper()} "{key}"' + (f' ({description})' if description else '')
        __env_logger.debug(f'{label} -> {shown_value}')

    return value


def flag(key: str, description: Optional[str] = None) -> bool:
    return bool(env(key,
                    default=False,
                    transform=lambda v: v.lower() in ('1', 'true'),
                    env_type='flag',
                    description=description))
