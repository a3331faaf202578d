# okta_lifecycle/api/okta_api/auth.py

import base64
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import requests

from .client import OktaAPIError, USER_AGENT

logger = logging.getLogger(__name__)

BEARER_PREFIX = 'Bearer '
SSWS_PREFIX = 'SSWS '

@dataclass(frozen=True)
class BearerAuth:
    token: str

@dataclass(frozen=True)
class BasicAuth:
    username: str
    password: str

@dataclass(frozen=True)
class OAuth2ClientCredentials:
    client_id: Optional[str]
    client_secret: str
    token_url: Optional[str]
    scope: Optional[str] = None
    audience: Optional[str] = None
    auth_style: Optional[str] = None

@dataclass(frozen=True)
class OAuth2AuthorizationCode:
    access_token: str

AuthConfig = Union[BearerAuth, BasicAuth, OAuth2ClientCredentials, OAuth2AuthorizationCode]

def resolve_auth(context: Mapping[str, Any]) -> AuthConfig:
    """
    Decide which credential scheme the context is configured for.

    Precedence: bearer token, basic username/password, OAuth2 client
    credentials, OAuth2 authorization-code access token.

    Raises:
        OktaAPIError: If no scheme is configured
    """
    secrets = context.get('secrets') or {}
    environment = context.get('environment') or {}

    if secrets.get('BEARER_AUTH_TOKEN'):
        return BearerAuth(secrets['BEARER_AUTH_TOKEN'])

    if secrets.get('BASIC_USERNAME') and secrets.get('BASIC_PASSWORD'):
        return BasicAuth(secrets['BASIC_USERNAME'], secrets['BASIC_PASSWORD'])

    if secrets.get('OAUTH2_CLIENT_CREDENTIALS_CLIENT_SECRET'):
        return OAuth2ClientCredentials(
            client_id=environment.get('OAUTH2_CLIENT_CREDENTIALS_CLIENT_ID'),
            client_secret=secrets['OAUTH2_CLIENT_CREDENTIALS_CLIENT_SECRET'],
            token_url=environment.get('OAUTH2_CLIENT_CREDENTIALS_TOKEN_URL'),
            scope=environment.get('OAUTH2_CLIENT_CREDENTIALS_SCOPE'),
            audience=environment.get('OAUTH2_CLIENT_CREDENTIALS_AUDIENCE'),
            auth_style=environment.get('OAUTH2_CLIENT_CREDENTIALS_AUTH_STYLE'),
        )

    if secrets.get('OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN'):
        return OAuth2AuthorizationCode(secrets['OAUTH2_AUTHORIZATION_CODE_ACCESS_TOKEN'])

    raise OktaAPIError("No authentication configured")

def fetch_client_credentials_token(auth: OAuth2ClientCredentials) -> str:
    """
    Exchange client credentials for an access token.

    Args:
        auth (OAuth2ClientCredentials): Client credential settings

    Returns:
        str: The Authorization header value, e.g. "Bearer eyJ..."
    """
    if not auth.client_id or not auth.token_url:
        raise OktaAPIError(
            "OAuth2 client credentials require OAUTH2_CLIENT_CREDENTIALS_CLIENT_ID "
            "and OAUTH2_CLIENT_CREDENTIALS_TOKEN_URL"
        )

    data = {'grant_type': 'client_credentials'}
    if auth.scope:
        data['scope'] = auth.scope
    if auth.audience:
        data['audience'] = auth.audience

    basic = None
    if (auth.auth_style or '').lower() == 'inparams':
        data['client_id'] = auth.client_id
        data['client_secret'] = auth.client_secret
    else:
        basic = (auth.client_id, auth.client_secret)

    try:
        response = requests.post(
            auth.token_url,
            data=data,
            auth=basic,
            headers={'Accept': 'application/json', 'User-Agent': USER_AGENT},
        )
    except requests.exceptions.RequestException as e:
        logger.error(f"Token request exception: {e}")
        raise OktaAPIError(f"Failed to obtain OAuth2 token: {e}") from e

    if not response.ok:
        raise OktaAPIError(
            f"Failed to obtain OAuth2 token: HTTP {response.status_code}",
            status_code=response.status_code,
            response_text=response.text,
        )

    try:
        payload = response.json()
    except ValueError as e:
        raise OktaAPIError("Failed to obtain OAuth2 token: invalid token response", status_code=500) from e

    token = payload.get('access_token') if isinstance(payload, dict) else None
    if not token:
        raise OktaAPIError("Failed to obtain OAuth2 token: no access_token in response", status_code=500)
    token_type = payload.get('token_type') or 'Bearer'
    return f"{token_type} {token}"

def get_authorization_headers(auth: AuthConfig) -> Dict[str, str]:
    """
    Build the Authorization header for a resolved credential scheme.

    Returns:
        Dict[str, str]: A fresh header mapping
    """
    if isinstance(auth, BearerAuth):
        return {'Authorization': f"{BEARER_PREFIX}{auth.token}"}
    if isinstance(auth, BasicAuth):
        raw = f"{auth.username}:{auth.password}".encode('utf-8')
        return {'Authorization': f"Basic {base64.b64encode(raw).decode('ascii')}"}
    if isinstance(auth, OAuth2ClientCredentials):
        return {'Authorization': fetch_client_credentials_token(auth)}
    if isinstance(auth, OAuth2AuthorizationCode):
        return {'Authorization': f"{BEARER_PREFIX}{auth.access_token}"}
    raise TypeError(f"Unsupported auth configuration: {type(auth).__name__}")

def normalize_okta_headers(auth: AuthConfig, headers: Mapping[str, str]) -> Dict[str, str]:
    """
    Rewrite a bearer-token Authorization value into Okta's SSWS form.

    Only the API-token scheme is rewritten; OAuth2 access tokens stay
    "Bearer". The input mapping is never modified.

    Args:
        auth (AuthConfig): The resolved credential scheme
        headers (Mapping[str, str]): Headers built for that scheme

    Returns:
        Dict[str, str]: A new header mapping
    """
    normalized = dict(headers)
    if not isinstance(auth, BearerAuth):
        return normalized

    value = normalized.get('Authorization', '')
    if value.startswith(BEARER_PREFIX):
        value = value[len(BEARER_PREFIX):]
    if not value.startswith(SSWS_PREFIX):
        value = f"{SSWS_PREFIX}{value}"
    normalized['Authorization'] = value
    return normalized
