"""
Dependency Injection Container for Brasier.

Manages all service instances and their dependencies.
"""

from typing import Optional

from brasier.application.use_cases.get_burn_claim import GetBurnClaim
from brasier.application.use_cases.list_wallet_claims import ListWalletClaims
from brasier.application.use_cases.verify_burn import VerifyBurn
from brasier.config.settings import get_settings
from brasier.domain.services.i_chain_reader import IChainReader
from brasier.domain.services.i_claim_ledger import IClaimLedger
from brasier.domain.services.reward_policy import RewardPolicy
from brasier.domain.value_objects.wallet_address import WalletAddress
from brasier.infrastructure.blockchain.solana_chain_reader import (
    SolanaChainReader,
)
from brasier.infrastructure.monitoring.logger import get_logger
from brasier.infrastructure.persistence.claim_ledger import SqlClaimLedger
from brasier.infrastructure.persistence.database import Database

logger = get_logger(__name__)


class DIContainer:
    """
    Dependency Injection Container.

    Holds singletons for connections (database, RPC session) and builds
    use cases on demand. Use cases are stateless, so a fresh instance
    per request is cheap.
    """

    def __init__(self):
        """Initialize container with None instances."""
        # Infrastructure
        self._database: Optional[Database] = None

        # Domain Services
        self._chain_reader: Optional[IChainReader] = None
        self._claim_ledger: Optional[IClaimLedger] = None

        self.verification_configured = False

    async def initialize(self) -> None:
        """Establish connections and report configuration problems."""
        await self.database.connect()
        self.verification_configured = self.check_configuration()

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._chain_reader:
            await self._chain_reader.close()

        if self._database:
            await self._database.disconnect()

    def check_configuration(self) -> bool:
        """
        Log whether burn verification is configured.

        The service still starts when it is not; verification requests
        are then rejected as misconfigured.
        """
        mint = get_settings().TOKEN_MINT_ADDRESS
        if not mint:
            logger.error(
                "TOKEN_MINT_ADDRESS is not set; burn verification is disabled"
            )
            return False
        try:
            WalletAddress(mint)
        except ValueError as e:
            logger.error(
                f"TOKEN_MINT_ADDRESS is invalid ({e}); burn verification is disabled"
            )
            return False
        return True

    # Infrastructure Getters

    @property
    def database(self) -> Database:
        """Get database instance."""
        if self._database is None:
            self._database = Database(
                database_url=get_settings().DATABASE_URL,
                echo=get_settings().DATABASE_ECHO,
            )
        return self._database

    # Domain Service Getters

    @property
    def chain_reader(self) -> IChainReader:
        """Get Solana chain reader instance."""
        if self._chain_reader is None:
            settings = get_settings()
            self._chain_reader = SolanaChainReader(
                rpc_url=settings.SOLANA_RPC_URL,
                commitment=settings.SOLANA_COMMITMENT,
                total_timeout=settings.RPC_TIMEOUT_SECONDS,
                connect_timeout=settings.RPC_CONNECT_TIMEOUT_SECONDS,
            )
        return self._chain_reader

    @property
    def claim_ledger(self) -> IClaimLedger:
        """Get claim ledger instance."""
        if self._claim_ledger is None:
            self._claim_ledger = SqlClaimLedger(self.database)
        return self._claim_ledger

    # Use Case Getters

    def get_verify_burn(self) -> VerifyBurn:
        """Get verify burn use case."""
        settings = get_settings()
        return VerifyBurn(
            chain_reader=self.chain_reader,
            claim_ledger=self.claim_ledger,
            target_mint=settings.TOKEN_MINT_ADDRESS,
            token_decimals=settings.TOKEN_DECIMALS,
            amount_policy=settings.AMOUNT_POLICY,
            reward_policy=RewardPolicy(rate=settings.BURN_REWARD_RATE),
            require_balance_corroboration=settings.REQUIRE_BALANCE_CORROBORATION,
            commitment=settings.SOLANA_COMMITMENT,
        )

    def get_get_burn_claim(self) -> GetBurnClaim:
        """Get burn claim lookup use case."""
        return GetBurnClaim(claim_ledger=self.claim_ledger)

    def get_list_wallet_claims(self) -> ListWalletClaims:
        """Get wallet claim history use case."""
        return ListWalletClaims(claim_ledger=self.claim_ledger)


# Global container instance
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get global DI container instance."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


async def initialize_container() -> DIContainer:
    """Initialize and return DI container."""
    container = get_container()
    await container.initialize()
    return container


async def shutdown_container() -> None:
    """Shutdown DI container."""
    container = get_container()
    await container.shutdown()


def reset_container() -> None:
    """Drop the global container (for testing)."""
    global _container
    _container = None
