"""Error classifiers for legacy user pool exceptions.

Converts Cognito Identity Provider (boto3/botocore) exceptions into
standardized OperationResult objects at the client boundary, so callers
switch on OperationStatus instead of matching exception names.

Usage:
    from infrastructure.operations.classifiers import classify_cognito_error

    try:
        response = client.admin_initiate_auth(**params)
    except Exception as exc:
        return classify_cognito_error(exc)
"""

from botocore.exceptions import BotoCoreError, ClientError

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

# Credential rejections: the caller supplied credentials the pool refuses.
CREDENTIAL_REJECTION_CODES = frozenset(
    {
        "NotAuthorizedException",
        "InvalidPasswordException",
        "PasswordResetRequiredException",
        "UserNotConfirmedException",
        "TooManyFailedAttemptsException",
        "InvalidParameterException",
    }
)

USER_NOT_FOUND_CODES = frozenset({"UserNotFoundException"})

# Mechanism-level rejections: the auth flow is not usable with this client.
MECHANISM_UNAVAILABLE_CODES = frozenset(
    {
        "AccessDeniedException",
        "UnauthorizedOperation",
    }
)

MECHANISM_UNAVAILABLE_MESSAGES = (
    "flow not enabled",
    "unable to verify secret hash",
    "configured with secret",
)


def _is_mechanism_unavailable(error_code: str, error_message: str) -> bool:
    if error_code in MECHANISM_UNAVAILABLE_CODES:
        return True
    if error_code in ("InvalidParameterException", "NotAuthorizedException"):
        lowered = error_message.lower()
        return any(marker in lowered for marker in MECHANISM_UNAVAILABLE_MESSAGES)
    return False


def classify_cognito_error(exc: Exception) -> OperationResult:
    """Classify Cognito Identity Provider errors into OperationResult.

    Error Code Mapping:
    - Auth flow disabled / IAM denied / secret hash mismatch → UNSUPPORTED
    - UserNotFoundException → NOT_FOUND
    - NotAuthorizedException, InvalidPasswordException,
      PasswordResetRequiredException, UserNotConfirmedException,
      TooManyFailedAttemptsException, InvalidParameterException → UNAUTHORIZED
    - Connection errors (BotoCoreError) → TRANSIENT_ERROR
    - Anything else → TRANSIENT_ERROR

    Unknown errors are never reported as UNAUTHORIZED; an outage must not
    look like a wrong password.

    Args:
        exc: Exception raised by the boto3 cognito-idp client

    Returns:
        OperationResult with the classified status, message and error_code
    """
    if not isinstance(exc, ClientError):
        if isinstance(exc, BotoCoreError):
            return OperationResult.transient_error(
                f"Cognito connection error: {type(exc).__name__}: {str(exc)}",
                error_code="CONNECTION_ERROR",
            )
        return OperationResult.transient_error(
            f"Unexpected error: {type(exc).__name__}: {str(exc)}",
            error_code="UNEXPECTED_ERROR",
        )

    error_code = "Unknown"
    error_message = str(exc)
    if hasattr(exc, "response") and exc.response:
        error_info = exc.response.get("Error", {})
        error_code = error_info.get("Code", "Unknown")
        error_message = error_info.get("Message", error_message)

    if _is_mechanism_unavailable(error_code, error_message):
        return OperationResult.error(
            OperationStatus.UNSUPPORTED,
            f"Cognito mechanism unavailable: {error_message}",
            error_code=error_code,
        )

    if error_code in USER_NOT_FOUND_CODES:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            "Cognito user not found",
            error_code=error_code,
        )

    if error_code in CREDENTIAL_REJECTION_CODES:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"Cognito rejected credentials: {error_message}",
            error_code=error_code,
        )

    return OperationResult.transient_error(
        f"Cognito client error: {error_code}: {error_message}",
        error_code=error_code,
    )
