"""Trigger dispatcher: the single entry point of the migration pipeline.

Validates the inbound event, runs the resolution chain in the mode the
flow needs, builds the flow's response and writes it into the event.
Every failure is raised to the caller; Cognito denies the operation on
any raised error.
"""

from infrastructure.logging import get_module_logger
from modules.user_migration.errors import (
    LegacyStoreUnavailableError,
    MissingIdentifierError,
    MissingPasswordError,
    NotAuthenticatedError,
    UnsupportedFlowError,
)
from modules.user_migration.models import (
    MigrationFlow,
    OutcomeKind,
    ResolutionMode,
    TriggerEvent,
)
from modules.user_migration.resolution import UserResolutionChain
from modules.user_migration.responses import build_response

logger = get_module_logger()

FLOW_MODES = {
    MigrationFlow.AUTHENTICATION: ResolutionMode.AUTHENTICATE,
    MigrationFlow.FORGOT_PASSWORD: ResolutionMode.LOOKUP_ONLY,
}


def parse_flow(value) -> MigrationFlow:
    """Return the MigrationFlow for a flow name.

    Raises:
        UnsupportedFlowError: value is not a supported flow
    """
    if isinstance(value, MigrationFlow):
        return value
    try:
        return MigrationFlow(value)
    except ValueError as exc:
        raise UnsupportedFlowError(value) from exc


class TriggerDispatcher:
    """Handle migration trigger events.

    Args:
        chain: user resolution chain bound to the legacy pool
    """

    def __init__(self, chain: UserResolutionChain) -> None:
        self._chain = chain

    def validate(self, event: TriggerEvent) -> MigrationFlow:
        """Check the event before any legacy pool call is made.

        Raises:
            UnsupportedFlowError, MissingIdentifierError, MissingPasswordError
        """
        flow = parse_flow(event.flow)
        if not event.login_identifier:
            raise MissingIdentifierError()
        if flow == MigrationFlow.AUTHENTICATION and not event.password:
            raise MissingPasswordError()
        return flow

    def handle(self, event: TriggerEvent) -> TriggerEvent:
        """Run the migration for one trigger event.

        Returns:
            The same event with `response` filled

        Raises:
            MigrationValidationError: malformed event
            NotAuthenticatedError: unknown user or rejected credentials
            IncompleteLegacyProfileError: required attributes missing
            LegacyStoreUnavailableError: legacy pool failure
            MigrationConfigurationError: no usable legacy auth mechanism
        """
        flow = self.validate(event)
        log = logger.bind(flow=flow.value)
        log.info("migration_started", login_identifier=event.login_identifier)

        outcome = self._chain.resolve(
            event.login_identifier, event.password, FLOW_MODES[flow]
        )

        if outcome.kind == OutcomeKind.TRANSIENT_ERROR:
            log.error("migration_legacy_store_error", cause=str(outcome.cause))
            raise LegacyStoreUnavailableError(
                "Legacy user pool is unavailable", cause=outcome.cause
            )
        if not outcome.is_found or outcome.user is None:
            log.info("migration_not_authenticated", outcome=outcome.kind.value)
            raise NotAuthenticatedError()

        event.response = build_response(flow, outcome.user)
        log.info(
            "migration_completed",
            legacy_username=outcome.user.username,
            attributes=sorted(event.response.attributes),
            final_user_status=(
                event.response.final_user_status.value
                if event.response.final_user_status
                else None
            ),
        )
        return event
