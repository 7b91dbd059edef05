import pytest

from modules.user_migration.errors import (
    IncompleteLegacyProfileError,
    MissingContactAttributeError,
    MissingRequiredAttributeError,
)
from modules.user_migration.models import FinalUserStatus, MigrationFlow
from modules.user_migration.responses import (
    build_authentication_response,
    build_forgot_password_response,
    build_response,
)


@pytest.mark.unit
class TestBuildAuthenticationResponse:
    def test_confirmed_user(self, make_legacy_user):
        response = build_authentication_response(make_legacy_user())

        assert response.attributes == {"email": "jane@x.com"}
        assert response.final_user_status == FinalUserStatus.CONFIRMED
        assert response.suppress_welcome_message is True

    @pytest.mark.parametrize(
        "status", ["FORCE_CHANGE_PASSWORD", "RESET_REQUIRED", "UNCONFIRMED", None]
    )
    def test_other_statuses_require_reset(self, make_legacy_user, status):
        response = build_authentication_response(make_legacy_user(status=status))

        assert response.final_user_status == FinalUserStatus.RESET_REQUIRED

    def test_missing_email(self, make_legacy_user):
        user = make_legacy_user(attributes={"sub": "1", "phone_number": "+15555550100"})

        with pytest.raises(MissingRequiredAttributeError) as excinfo:
            build_authentication_response(user)

        assert excinfo.value.attribute == "email"
        assert isinstance(excinfo.value, IncompleteLegacyProfileError)

    def test_empty_email_counts_as_missing(self, make_legacy_user):
        with pytest.raises(MissingRequiredAttributeError):
            build_authentication_response(make_legacy_user(attributes={"email": ""}))


@pytest.mark.unit
class TestBuildForgotPasswordResponse:
    def test_unverified_email_becomes_verified(self, make_legacy_user):
        user = make_legacy_user(
            attributes={"sub": "1", "email": "jane@x.com", "email_verified": "false"}
        )

        response = build_forgot_password_response(user)

        assert response.attributes == {"email": "jane@x.com", "email_verified": "true"}
        assert response.final_user_status is None
        assert response.suppress_welcome_message is True

    def test_verified_email_stays_verified(self, make_legacy_user):
        user = make_legacy_user(attributes={"email": "jane@x.com", "email_verified": "true"})

        response = build_forgot_password_response(user)

        assert response.attributes["email_verified"] == "true"

    def test_phone_only(self, make_legacy_user):
        user = make_legacy_user(attributes={"phone_number": "+15555550100"})

        response = build_forgot_password_response(user)

        assert response.attributes == {
            "phone_number": "+15555550100",
            "phone_number_verified": "true",
        }

    def test_both_channels_verified(self, make_legacy_user):
        user = make_legacy_user(
            attributes={"email": "jane@x.com", "phone_number": "+15555550100"}
        )

        response = build_forgot_password_response(user)

        assert response.attributes["email_verified"] == "true"
        assert response.attributes["phone_number_verified"] == "true"

    def test_no_contact_channel(self, make_legacy_user):
        user = make_legacy_user(attributes={"sub": "1", "given_name": "Jane"})

        with pytest.raises(MissingContactAttributeError):
            build_forgot_password_response(user)


@pytest.mark.unit
class TestBuildResponse:
    def test_dispatches_per_flow(self, make_legacy_user):
        user = make_legacy_user()

        auth = build_response(MigrationFlow.AUTHENTICATION, user)
        reset = build_response(MigrationFlow.FORGOT_PASSWORD, user)

        assert auth.final_user_status == FinalUserStatus.CONFIRMED
        assert reset.final_user_status is None
        assert reset.attributes["email_verified"] == "true"
