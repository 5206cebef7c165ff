from typing import List
import logging

from appwrite.exception import AppwriteException
from appwrite.id import ID
from pydantic import ValidationError

from adapters.appwrite_adapter import AppwriteBackend
from app.exceptions import (
    AccountCreationError,
    AuthenticationError,
    NoActiveSessionError,
    ProfileNotFoundError,
    QueryError,
    backend_details,
    backend_message,
)
from domain.schemas import (
    CreateUserParams,
    Session,
    SignInParams,
    UserProfile,
    UserProfileCreate,
)
from repositories import UserRepository

logger = logging.getLogger("foodorder.auth")


def _input_errors(exc: ValidationError) -> List[str]:
    return [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]


class AuthService:
    """Account, session and user profile operations"""

    @staticmethod
    def create_account(
        backend: AppwriteBackend, email: str, password: str, name: str
    ) -> UserProfile:
        """
        Create an account, sign it in and create its user profile.

        The profile avatar is the initials placeholder generated from the name.
        If the profile cannot be created the account is left in place.

        Raises:
            AccountCreationError: the input is invalid or the backend rejected a step
        """
        try:
            params = CreateUserParams(email=email, password=password, name=name)
        except ValidationError as exc:
            raise AccountCreationError(
                "Invalid account details",
                details={"errors": _input_errors(exc)},
                code="invalid_input",
            ) from exc
        # Caller values go to the backend unchanged

        try:
            account = backend.account.create(
                user_id=ID.unique(),
                email=email,
                password=password,
                name=name,
            )
        except AppwriteException as exc:
            logger.warning(f"account_rejected email={params.email} error={exc}")
            raise AccountCreationError(
                backend_message(exc), details=backend_details(exc), code="account_rejected"
            ) from exc

        if not account or not account.get("$id"):
            raise AccountCreationError("Backend returned no account", code="account_rejected")
        account_id = account["$id"]

        try:
            AuthService.sign_in(backend, email, password)
        except AuthenticationError as exc:
            raise AccountCreationError(
                exc.message, details=exc.details, code="session_failed"
            ) from exc

        profile = UserProfileCreate(
            account_id=account_id,
            email=email,
            name=name,
            avatar=backend.initials_avatar_url(name),
        )
        try:
            user = UserRepository(backend).create_profile(profile)
        except AppwriteException as exc:
            logger.error(f"profile_create_failed account_id={account_id} error={exc}")
            raise AccountCreationError(
                backend_message(exc), details=backend_details(exc), code="profile_failed"
            ) from exc

        logger.info(f"account_created account_id={account_id} profile_id={user.id}")
        return user

    @staticmethod
    def sign_in(backend: AppwriteBackend, email: str, password: str) -> Session:
        """
        Exchange email and password for a session.

        Later calls through the same backend handle run as the signed-in account.

        Raises:
            AuthenticationError: invalid input, invalid credentials or backend fault
        """
        try:
            params = SignInParams(email=email, password=password)
        except ValidationError as exc:
            raise AuthenticationError(
                "Invalid credentials",
                details={"errors": _input_errors(exc)},
                code="invalid_input",
            ) from exc

        try:
            session = backend.account.create_email_password_session(
                email=email, password=password
            )
        except AppwriteException as exc:
            logger.warning(f"sign_in_failed email={params.email} error={exc}")
            raise AuthenticationError(
                backend_message(exc), details=backend_details(exc), code="sign_in_failed"
            ) from exc

        backend.attach_session(session)
        result = Session.model_validate(session)
        logger.info(f"signed_in user_id={result.user_id}")
        return result

    @staticmethod
    def get_current_user(backend: AppwriteBackend) -> UserProfile:
        """
        Return the profile of the signed-in account.

        Raises:
            NoActiveSessionError: nobody is signed in
            ProfileNotFoundError: the account has no profile document
            QueryError: any other backend fault
        """
        try:
            account = backend.account.get()
        except AppwriteException as exc:
            if exc.code == 401:
                raise NoActiveSessionError(
                    backend_message(exc), details=backend_details(exc), code="no_session"
                ) from exc
            raise QueryError(
                backend_message(exc), details=backend_details(exc), code="account_lookup_failed"
            ) from exc

        if not account or not account.get("$id"):
            raise NoActiveSessionError(code="no_session")
        account_id = account["$id"]

        try:
            profiles = UserRepository(backend).find_by_account_id(account_id)
        except AppwriteException as exc:
            raise QueryError(
                backend_message(exc), details=backend_details(exc), code="profile_lookup_failed"
            ) from exc

        if not profiles:
            logger.error(f"profile_missing account_id={account_id}")
            raise ProfileNotFoundError(
                f"No user profile for account {account_id}",
                details={"account_id": account_id},
                code="profile_missing",
            )
        if len(profiles) > 1:
            # Earliest-created profile wins
            logger.warning(
                f"profile_duplicates account_id={account_id} count={len(profiles)} "
                f"using={profiles[0].id}"
            )
        return profiles[0]
