from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from taskhub.config import ApplicationConfig
from taskhub.adapter.services.notifier import LoggingNotifier, SMTPSettings, SmtpNotifier
from taskhub.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from taskhub.api.error import raise_for_error
from taskhub.app.services.notifier import Notifier
from taskhub.app.use_cases.auth import TokenPayload, ValidateAccessTokenUseCase

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def build_notifier() -> Notifier:
    """SMTP when a host is configured, otherwise log-only development mode"""
    if not ApplicationConfig.SMTP_HOST:
        return LoggingNotifier()
    return SmtpNotifier(
        SMTPSettings(
            host=ApplicationConfig.SMTP_HOST,
            port=ApplicationConfig.SMTP_PORT,
            username=ApplicationConfig.SMTP_USERNAME,
            password=ApplicationConfig.SMTP_PASSWORD,
            use_tls=ApplicationConfig.SMTP_USE_TLS,
            timeout=ApplicationConfig.SMTP_TIMEOUT,
            from_email=ApplicationConfig.SMTP_FROM_EMAIL,
            from_name=ApplicationConfig.SMTP_FROM_NAME,
        )
    )


_notifier = build_notifier()


def get_notifier() -> Notifier:
    return _notifier


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> TokenPayload:
    """
    Dependency to extract and verify the bearer access token.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Validated claims (user_id, email)

    Raises:
        ClientError: 401 if token is invalid or expired
    """
    result = ValidateAccessTokenUseCase().execute(credentials.credentials)
    raise_for_error(result)
    return result.value
