"""CreateUser Handler."""

import logging

from civic_portal.application.shared import CommandHandler, UseCaseResult
from civic_portal.application.users.commands import CreateUserCommand, CreateUserError
from civic_portal.application.users.dtos import UserDTO
from civic_portal.domain.shared import ValidationError
from civic_portal.domain.users import Email, User, UserRepository

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100


class CreateUserHandler(CommandHandler[CreateUserCommand, UseCaseResult[UserDTO]]):
    """Handler for CreateUser command.

    Input is checked before the repository is touched: a missing email is
    INVALID_EMAIL, a blank or over-long name is INVALID_NAME. Domain
    validation of the email format maps to INVALID_EMAIL as well.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, command: CreateUserCommand) -> UseCaseResult[UserDTO]:
        error = self._validate(command)
        if error is not None:
            logger.info("create_user.rejected", extra={"reason": error.value})
            return UseCaseResult.fail(error)

        try:
            email = Email(command.email)
        except ValidationError:
            logger.info("create_user.rejected", extra={"reason": "invalid_email_format"})
            return UseCaseResult.fail(CreateUserError.INVALID_EMAIL)

        if await self._user_repo.exists(email):
            logger.info("create_user.email_taken", extra={"email_domain": email.domain})
            return UseCaseResult.fail(CreateUserError.EMAIL_ALREADY_EXISTS)

        user = User.create(email=email, name=command.name)
        await self._user_repo.save(user)

        logger.info("create_user.completed", extra={"user_id": user.id.value})
        return UseCaseResult.ok(UserDTO.from_entity(user))

    @staticmethod
    def _validate(command: CreateUserCommand) -> CreateUserError | None:
        if not isinstance(command.email, str) or not command.email:
            return CreateUserError.INVALID_EMAIL
        if not isinstance(command.name, str):
            return CreateUserError.INVALID_NAME
        name = command.name.strip()
        if not name or len(name) > MAX_NAME_LENGTH:
            return CreateUserError.INVALID_NAME
        return None
