"""
One-time code generation with per-purpose uniqueness.

Six digits leave room for collisions between users. A drawn code is
re-drawn while another user holds the same active code of the same
purpose, so lookups by code always resolve to one account.
"""

from taskhub.app.services.credentials import generate_otp
from taskhub.app.services.unit_of_work import UnitOfWork

MAX_ATTEMPTS = 10


async def generate_unique_verification_code(uow: UnitOfWork) -> str:
    code = generate_otp()
    for _ in range(MAX_ATTEMPTS):
        if await uow.users.get_by_verification_code(code) is None:
            break
        code = generate_otp()
    return code


async def generate_unique_reset_code(uow: UnitOfWork) -> str:
    code = generate_otp()
    for _ in range(MAX_ATTEMPTS):
        if await uow.users.get_by_reset_code(code) is None:
            break
        code = generate_otp()
    return code
