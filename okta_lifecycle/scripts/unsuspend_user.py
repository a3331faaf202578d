#!/usr/bin/env python3

import sys
import json
import logging
from okta_lifecycle.api.okta_api import OktaAPIError, invoke, load_context

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def main():
    # Check if we have the required arguments
    if len(sys.argv) < 2:
        result = {
            "success": False,
            "error": "Missing required argument: user_id",
            "message": "Usage: python -m okta_lifecycle.scripts.unsuspend_user <user_id> [address]"
        }
        print(json.dumps(result))
        sys.exit(1)

    user_id = sys.argv[1]
    params = {"userId": user_id}
    if len(sys.argv) > 2:
        params["address"] = sys.argv[2]

    try:
        context = load_context()
        result = invoke(params, context)
    except OktaAPIError as e:
        logger.error(f"Failed to unsuspend user {user_id}: {e.message}")
        output = {
            "success": False,
            "error": e.message,
            "status_code": e.status_code,
            "message": f"Failed to unsuspend user {user_id}"
        }
        print(json.dumps(output))
        sys.exit(1)

    output = {
        "success": True,
        "message": f"User {user_id} unsuspended successfully",
        "result": result
    }
    print(json.dumps(output))

if __name__ == "__main__":
    main()
