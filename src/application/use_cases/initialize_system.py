"""Initialize System Use Case - first-run setup driven from a till."""

from dataclasses import dataclass

from src.config import get_logger, get_settings
from src.core.exceptions import SetupError

logger = get_logger(__name__)

LOGIN_ROUTE = "/login"


@dataclass
class SetupResult:
    """Outcome of a successful setup; the caller moves on to the login screen."""

    message: str
    redirect_to: str = LOGIN_ROUTE
    redirect_after: float = 2.0


class InitializeSystemUseCase:
    """
    Ask the server to seed its database.

    A single request with no body; the server decides whether seeding is
    allowed and reports why not.
    """

    def __init__(self, client=None):
        self._client = client

    def _get_client(self):
        if self._client is None:
            from src.infrastructure.client import POSClient

            self._client = POSClient()
        return self._client

    async def execute(self) -> SetupResult:
        """
        Raises:
            SetupError: The server refused or could not be reached
        """
        logger.info("system_initialization_started")
        try:
            message = await self._get_client().force_seed()
        except SetupError as e:
            logger.error("system_initialization_failed", error=e.message)
            raise

        logger.info("system_initialized")
        return SetupResult(
            message=message,
            redirect_after=get_settings().client.redirect_delay,
        )
