"""Wire contracts for the Cognito user migration trigger.

Pydantic models for the Lambda event Cognito sends and the `response`
object it expects back, plus the conversions to and from the internal
TriggerEvent / MigrationResponse dataclasses.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from modules.user_migration.models import MigrationResponse, TriggerEvent

TRIGGER_SOURCE_PREFIX = "UserMigration_"
SUPPRESS_MESSAGE_ACTION = "SUPPRESS"


class CognitoMigrationRequest(BaseModel):
    """The `request` object of the trigger event."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    password: Optional[str] = Field(default=None, repr=False)
    validation_data: Optional[Dict[str, Any]] = Field(
        default=None, alias="validationData"
    )
    client_metadata: Optional[Dict[str, Any]] = Field(
        default=None, alias="clientMetadata"
    )


class CognitoMigrationEvent(BaseModel):
    """User migration trigger event as delivered to the Lambda."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    trigger_source: str = Field(default="", alias="triggerSource")
    user_pool_id: Optional[str] = Field(default=None, alias="userPoolId")
    user_name: Optional[str] = Field(default=None, alias="userName")
    request: CognitoMigrationRequest = Field(default_factory=CognitoMigrationRequest)

    @property
    def flow(self) -> str:
        """Flow name without the trigger source prefix."""
        if self.trigger_source.startswith(TRIGGER_SOURCE_PREFIX):
            return self.trigger_source[len(TRIGGER_SOURCE_PREFIX) :]
        return self.trigger_source


class CognitoMigrationResponse(BaseModel):
    """The `response` object Cognito reads back from the trigger."""

    model_config = ConfigDict(populate_by_name=True)

    user_attributes: Dict[str, str] = Field(alias="userAttributes")
    final_user_status: Optional[str] = Field(default=None, alias="finalUserStatus")
    message_action: Optional[str] = Field(default=None, alias="messageAction")

    @classmethod
    def from_migration_response(
        cls, response: MigrationResponse
    ) -> "CognitoMigrationResponse":
        return cls(
            user_attributes=dict(response.attributes),
            final_user_status=(
                response.final_user_status.value
                if response.final_user_status
                else None
            ),
            message_action=(
                SUPPRESS_MESSAGE_ACTION if response.suppress_welcome_message else None
            ),
        )


def parse_trigger_event(raw: Dict[str, Any]) -> TriggerEvent:
    """Build a TriggerEvent from the raw Lambda event.

    Parsing is lenient: a missing identifier, password or unknown flow is
    reported by the dispatcher, not here.
    """
    event = CognitoMigrationEvent.model_validate(raw or {})
    return TriggerEvent(
        flow=event.flow,
        login_identifier=event.user_name,
        password=event.request.password,
        raw=dict(raw or {}),
    )


def to_lambda_response(event: TriggerEvent) -> Dict[str, Any]:
    """Return the raw event with `response` replaced by the migration response."""
    output = dict(event.raw)
    if event.response is None:
        output["response"] = {}
        return output

    output["response"] = CognitoMigrationResponse.from_migration_response(
        event.response
    ).model_dump(by_alias=True, exclude_none=True)
    return output
