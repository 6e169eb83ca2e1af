"""
AWS Lambda entrypoint for GitHub Wrapped

Event-driven handler that fetches one user's year and returns derived stats.
No HTTP server logic - just direct function invocation.
"""

import asyncio
import logging
from typing import Dict, Any, Optional

from github_wrapped.orchestrator import WrappedOrchestrator, failure_status_code

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Instantiate orchestrator once per Lambda execution environment
orchestrator = WrappedOrchestrator()


def lambda_handler(event: Optional[Dict[str, Any]], context: Any) -> Dict[str, Any]:
    """
    AWS Lambda entrypoint for GitHub Wrapped.

    Expected event payload:
    - {"login": "octocat", "year": 2025, "token": "<optional PAT>"}

    The token falls back to the GITHUB_TOKEN setting and the year to the
    current UTC year.

    Args:
        event: Event payload
        context: Lambda context object

    Returns:
        Dictionary with statusCode and either result or error
    """
    payload = event or {}
    login = str(payload.get("login") or "")
    logger.info(f"Lambda invoked for login: {login}")

    try:
        year = int(payload["year"]) if payload.get("year") is not None else None
    except (TypeError, ValueError):
        return {"statusCode": 400, "login": login, "error": f"Invalid year: {payload.get('year')!r}"}

    try:
        result = asyncio.run(orchestrator.run(login, token=payload.get("token"), year=year))
    except Exception as e:
        logger.error(f"Lambda execution failed: {e}", exc_info=True)
        return {
            "statusCode": 500,
            "login": login,
            "error": str(e),
        }

    if not result["success"]:
        return {
            "statusCode": failure_status_code(result),
            "login": login,
            "error": result["error"],
        }

    return {
        "statusCode": 200,
        "login": login,
        "result": result,
    }
