from taskhub.domain.errors import NotFoundError
from taskhub.libs.result import Result, Return
from taskhub.app.services.unit_of_work import UnitOfWork
from taskhub.app.use_cases.auth.dtos import UserInfo


class GetUserUseCase:
    """Load the public profile of a user by ID"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(NotFoundError("USER_NOT_FOUND", "User not found"))
            return Return.ok(UserInfo.from_user(user))
