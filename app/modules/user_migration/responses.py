"""Migration response builders, one per flow.

Turns an authenticated (or located) legacy user into the attributes and
flags the new pool needs. Missing contact data is never fabricated.
"""

from modules.user_migration.attributes import normalize
from modules.user_migration.errors import (
    MissingContactAttributeError,
    MissingRequiredAttributeError,
)
from modules.user_migration.models import (
    FinalUserStatus,
    LegacyUserRecord,
    MigrationFlow,
    MigrationResponse,
)

VERIFIED = "true"

# contact attribute -> its verification flag
CONTACT_ATTRIBUTES = {
    "email": "email_verified",
    "phone_number": "phone_number_verified",
}


def build_authentication_response(user: LegacyUserRecord) -> MigrationResponse:
    """Build the sign-in response.

    Raises:
        MissingRequiredAttributeError: the legacy profile has no email
    """
    attributes = normalize(user.attributes)
    if not attributes.get("email"):
        raise MissingRequiredAttributeError("email")

    final_status = (
        FinalUserStatus.CONFIRMED
        if user.is_confirmed
        else FinalUserStatus.RESET_REQUIRED
    )
    return MigrationResponse(
        attributes=attributes,
        final_user_status=final_status,
        suppress_welcome_message=True,
    )


def build_forgot_password_response(user: LegacyUserRecord) -> MigrationResponse:
    """Build the password-reset response.

    Every contact channel present is marked verified in the new pool.

    Raises:
        MissingContactAttributeError: neither email nor phone_number is present
    """
    attributes = normalize(user.attributes)
    present = [name for name in CONTACT_ATTRIBUTES if attributes.get(name)]
    if not present:
        raise MissingContactAttributeError()

    for name in present:
        attributes[CONTACT_ATTRIBUTES[name]] = VERIFIED

    return MigrationResponse(attributes=attributes, suppress_welcome_message=True)


BUILDERS = {
    MigrationFlow.AUTHENTICATION: build_authentication_response,
    MigrationFlow.FORGOT_PASSWORD: build_forgot_password_response,
}


def build_response(flow: MigrationFlow, user: LegacyUserRecord) -> MigrationResponse:
    return BUILDERS[flow](user)
