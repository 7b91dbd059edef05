"""User migration trigger module.

Migrates users from a legacy Cognito user pool into a new one at sign-in
or password-reset time: the legacy pool vouches for the user and supplies
their attributes, and the new pool creates the account silently.

Pipeline (leaves first):
- legacy_client: capability wrapper over the legacy pool
- strategies: legacy authentication mechanisms in priority order
- resolution: username/email resolution chain
- attributes: attribute normalization
- responses: per-flow response builders
- dispatcher: entry point for one trigger event
"""

from modules.user_migration.bootstrap import build_dispatcher, get_dispatcher
from modules.user_migration.dispatcher import TriggerDispatcher
from modules.user_migration.models import (
    MigrationFlow,
    MigrationOutcome,
    MigrationResponse,
    TriggerEvent,
)
from modules.user_migration.schemas import parse_trigger_event, to_lambda_response

__all__ = [
    "build_dispatcher",
    "get_dispatcher",
    "TriggerDispatcher",
    "MigrationFlow",
    "MigrationOutcome",
    "MigrationResponse",
    "TriggerEvent",
    "parse_trigger_event",
    "to_lambda_response",
]
