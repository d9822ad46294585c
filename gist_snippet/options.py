"""
Options shared by every snippet a host renders.

Hosts usually hand these over as a plain dict using the camelCase names of
the Eleventy gist plugin (authToken, userAgent, useCache, debug,
addHiddenField); snake_case keys are accepted too.
"""
from dataclasses import dataclass, fields
from typing import Any, Mapping

import structlog

from .errors import ConfigMissingError, CredentialValidationError

logger = structlog.get_logger(__name__)

ALIASES = {
    'authToken': 'auth_token',
    'userAgent': 'user_agent',
    'useCache': 'use_cache',
    'addHiddenField': 'add_hidden_field',
    'addHidden': 'add_hidden_field',
}

SETUP_EXAMPLE = """gist error: please pass a valid configuration:
    example: options = {
        'authToken': '<MY_GITHUB_AUTH_TOKEN>',
        'userAgent': '<MY_USER_AGENT>',
        'useCache': True,
        'debug': False,
        'addHiddenField': False,
    }
    await produce_snippet('my-gist-id', 'my-file', options)
"""


def as_flag(value) -> bool:
    """Read a flag that may arrive as a string, e.g. "false" from a templated config."""
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes', 'on')
    return bool(value)


@dataclass(frozen=True)
class RequestOptions:
    auth_token: str = ''
    user_agent: str = ''
    use_cache: bool = False
    debug: bool = False
    add_hidden_field: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RequestOptions":
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            name = ALIASES.get(key, key)
            if name not in known:
                logger.debug("gist_option_ignored", option=key)
                continue
            values[name] = value

        return cls(
            auth_token=values.get('auth_token') or '',
            user_agent=values.get('user_agent') or '',
            use_cache=as_flag(values.get('use_cache')),
            debug=as_flag(values.get('debug')),
            add_hidden_field=as_flag(values.get('add_hidden_field')),
        )


def coerce_options(options) -> RequestOptions:
    """Turn whatever the host passed into RequestOptions.

    Raises:
        ConfigMissingError: options is None
    """
    if options is None:
        raise ConfigMissingError(SETUP_EXAMPLE)
    if isinstance(options, RequestOptions):
        return options
    if isinstance(options, Mapping):
        return RequestOptions.from_mapping(options)
    raise ConfigMissingError(SETUP_EXAMPLE)


def verify_options(options: RequestOptions) -> RequestOptions:
    """Check that both credentials are present before any network call."""
    problems = []
    if not options.auth_token:
        problems.append("gist needs a valid Github auth token")
    if not options.user_agent:
        problems.append("gist needs a valid User Agent name")

    if problems:
        raise CredentialValidationError("; ".join(problems))
    return options
