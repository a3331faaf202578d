# okta_lifecycle/api/okta_api/config.py

import configparser
import os
import logging
from typing import Any, Dict, Mapping, Optional

from .. import _API_Path
from .client import OktaAPIError

logger = logging.getLogger(__name__)

SECRET_KEYS = (
    'BEARER_AUTH_TOKEN',
    'BASIC_USERNAME',
    'BASIC_PASSWORD',
    'OAUTH2_CLIENT_CREDENTIALS_CLIENT_SECRET',
    'OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN',
)

ENVIRONMENT_KEYS = (
    'ADDRESS',
    'OAUTH2_CLIENT_CREDENTIALS_AUDIENCE',
    'OAUTH2_CLIENT_CREDENTIALS_AUTH_STYLE',
    'OAUTH2_CLIENT_CREDENTIALS_CLIENT_ID',
    'OAUTH2_CLIENT_CREDENTIALS_SCOPE',
    'OAUTH2_CLIENT_CREDENTIALS_TOKEN_URL',
)

def _load_env_file(api_directory: _API_Path) -> None:
    """
    Best-effort loader for a local .env file to populate os.environ when
    running outside the job framework.

    Checks a few common locations and only sets variables that are not
    already present in the environment.
    """
    def parse_and_set(env_path: str) -> None:
        try:
            with open(env_path, 'r') as f:
                for line in f:
                    s = line.strip()
                    if not s or s.startswith('#'):
                        continue
                    if '=' not in s:
                        continue
                    key, val = s.split('=', 1)
                    key = key.strip()
                    val = val.strip().strip('"\'')
                    if key and key not in os.environ:
                        os.environ[key] = val
        except OSError as e:
            logger.warning(f"Could not read {env_path}: {e}")

    candidates = [
        os.path.join(os.getcwd(), '.env'),
        os.path.join(api_directory.root(), '.env'),
        os.path.join(os.path.dirname(api_directory.root()), '.env'),
    ]
    for path in candidates:
        if os.path.isfile(path):
            parse_and_set(path)

def _read_ini(path: str, section: str) -> Dict[str, str]:
    # configparser lowercases option names; the context uses the upper-case names
    parser = configparser.ConfigParser()
    parser.read(path)
    if section not in parser:
        return {}
    return {key.upper(): value for key, value in parser[section].items()}

def load_context(api_directory: Optional[_API_Path] = None) -> Dict[str, Dict[str, str]]:
    """
    Build an execution context with the following precedence:
    1) Environment variables, optionally populated from a .env file
    2) Legacy config files: config.ini ([Settings]) and auth.ini ([Credentials])

    Returns:
        Dict[str, Dict[str, str]]: {"secrets": {...}, "environment": {...}}
    """
    api_directory = api_directory or _API_Path()
    _load_env_file(api_directory)

    settings = _read_ini(os.path.join(api_directory.okta(), 'config.ini'), 'Settings')
    credentials = _read_ini(os.path.join(api_directory.okta(), 'auth.ini'), 'Credentials')

    secrets = {}
    for key in SECRET_KEYS:
        value = os.environ.get(key) or credentials.get(key)
        if value:
            secrets[key] = value

    environment = {}
    for key in ENVIRONMENT_KEYS:
        value = os.environ.get(key) or settings.get(key)
        if value:
            environment[key] = value

    return {'secrets': secrets, 'environment': environment}

def get_base_url(params: Mapping[str, Any], context: Mapping[str, Any]) -> str:
    """
    Resolve the Okta base URL from the job parameters or the environment.

    Args:
        params: Job input parameters, may carry ``address``
        context: Execution context, may carry ``environment.ADDRESS``

    Returns:
        str: Base URL without a trailing slash

    Raises:
        OktaAPIError: If neither source provides an address
    """
    environment = context.get('environment') or {}
    address = params.get('address') or environment.get('ADDRESS')
    if not address:
        raise OktaAPIError("No URL specified. Provide address parameter or ADDRESS environment variable")
    return address.rstrip('/')
