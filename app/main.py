"""Lambda entry point for the Cognito user migration trigger.

The dispatcher is built once while the module loads, during the Lambda
init phase. Missing configuration fails the cold start instead of every
invocation.
"""

from typing import Any, Dict

from infrastructure.logging import (
    bind_request_context,
    clear_request_context,
    get_module_logger,
)
from modules.user_migration import (
    get_dispatcher,
    parse_trigger_event,
    to_lambda_response,
)
from modules.user_migration.errors import MigrationConfigurationError, MigrationError

logger = get_module_logger()

dispatcher = get_dispatcher()


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Handle one user migration trigger invocation.

    Returns the event with `response` filled. Any raised error tells
    Cognito to deny the sign-in or password reset.
    """
    raw = event or {}
    try:
        with bind_request_context(
            correlation_id=getattr(context, "aws_request_id", None),
            trigger_source=raw.get("triggerSource"),
            user_pool_id=raw.get("userPoolId"),
        ):
            try:
                result = dispatcher.handle(parse_trigger_event(raw))
            except MigrationConfigurationError as e:
                logger.error("migration_misconfigured", error=str(e))
                raise
            except MigrationError as e:
                logger.warning(
                    "migration_denied", error=str(e), error_type=type(e).__name__
                )
                raise
            except Exception as e:
                logger.exception("migration_failed", error=str(e))
                raise
            return to_lambda_response(result)
    finally:
        clear_request_context()
