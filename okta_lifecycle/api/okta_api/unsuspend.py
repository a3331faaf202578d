# okta_lifecycle/api/okta_api/unsuspend.py

"""
Unsuspend an Okta user and confirm the account left the SUSPENDED state.

The job framework calls ``invoke`` for the work itself, ``error`` when
``invoke`` raised, and ``halt`` when the job is cancelled.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping

from .auth import get_authorization_headers, normalize_okta_headers, resolve_auth
from .client import OktaAPIError, OktaResponse
from .config import get_base_url
from .users import UsersClient

logger = logging.getLogger(__name__)

SUSPENDED = 'SUSPENDED'

def _validate_user_id(params: Mapping[str, Any]) -> str:
    user_id = params.get('userId')
    if not isinstance(user_id, str) or not user_id:
        raise OktaAPIError("userId is required and must be a non-empty string")
    return user_id

def _raise_for_transition(user_id: str, response: OktaResponse) -> None:
    """
    Decide whether the lifecycle call lets verification go ahead.

    A 400 is let through: Okta answers 400 when the user is not suspended,
    and the read-back settles whether that means success.
    """
    if response.success:
        return
    if response.status_code == 400:
        logger.info(f"Unsuspend for user {user_id} returned HTTP 400, verifying current status")
        return

    message = f"Failed to unsuspend user: HTTP {response.status_code}"
    if isinstance(response.data, dict) and response.data.get('errorSummary'):
        message = f"Failed to unsuspend user: {response.data['errorSummary']}"
    if response.parsed:
        logger.error(f"{response.message}, Okta API error response: {response.data}")
    else:
        logger.error(f"{response.message}, failed to parse error response")
    raise OktaAPIError(message, status_code=response.status_code, response_text=response.error)

def _read_back(user_id: str, response: OktaResponse) -> Dict[str, Any]:
    if not response.success:
        raise OktaAPIError(
            f"Cannot fetch information about User: HTTP {response.status_code}",
            status_code=response.status_code,
            response_text=response.error,
        )
    if not response.parsed or not isinstance(response.data, dict):
        raise OktaAPIError(f"Cannot parse user data for user {user_id}", status_code=500)
    return response.data

def invoke(params: Mapping[str, Any], context: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Unsuspend the user named by ``params["userId"]``.

    Args:
        params: Job input parameters
            userId (str): The Okta user id
            address (str, optional): Okta base URL, defaults to environment ADDRESS
        context: Execution context with ``secrets`` and ``environment``

    Returns:
        Dict[str, Any]: userId, unsuspended, address, unsuspendedAt, status.
            ``status`` is the read-back value as-is; it is None when Okta
            returned no status field, which is not treated as a failure.

    Raises:
        OktaAPIError: On invalid input, missing configuration, a rejected
            lifecycle call, a failed read-back, or a user still SUSPENDED
    """
    user_id = _validate_user_id(params)
    logger.info(f"Starting Okta user unsuspension for user: {user_id}")

    base_url = get_base_url(params, context)
    auth = resolve_auth(context)
    headers = normalize_okta_headers(auth, get_authorization_headers(auth))

    with UsersClient(base_url, headers) as client:
        _raise_for_transition(user_id, client.unsuspend_user(user_id))
        user = _read_back(user_id, client.get_user(user_id))

    status = user.get('status')
    if status is None:
        logger.warning(f"Read-back for user {user_id} carries no status field")
    if status == SUSPENDED:
        raise OktaAPIError(
            f"User {user_id} could not be unsuspended, status is still {status}",
            status_code=400,
        )

    logger.info(f"Successfully unsuspended user {user_id} (status: {status})")
    return {
        'userId': user_id,
        'unsuspended': True,
        'address': base_url,
        'unsuspendedAt': user.get('statusChanged') or user.get('lastUpdated'),
        'status': status,
    }

def error(params: Mapping[str, Any], context: Mapping[str, Any]) -> None:
    """
    Error recovery handler. Retries for transient errors belong to the
    framework, so the original error is logged and re-raised unchanged.
    """
    err = params['error']
    message = getattr(err, 'message', None) or str(err)
    logger.error(f"User unsuspension failed for user {params.get('userId')}: {message}")
    raise err

def halt(params: Mapping[str, Any], context: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Halt handler. The lifecycle call either completed or it didn't, so there
    is nothing to roll back.
    """
    user_id = params.get('userId')
    reason = params.get('reason')
    logger.info(f"User unsuspension job is being halted ({reason}) for user {user_id}")

    return {
        'userId': user_id or 'unknown',
        'reason': reason,
        'haltedAt': datetime.now(timezone.utc).isoformat(),
        'cleanupCompleted': True,
    }
