"""
Integration tests for the Brasier HTTP API.

Runs the real application (middleware, exception handlers, schemas)
through httpx's ASGI transport. Use cases are wired to a mocked chain
reader and an in-memory claim ledger via dependency overrides.

Usage:
    python -m tests.integration.api.test_burn_routes
    pytest brasier/tests/integration
"""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from httpx import ASGITransport, AsyncClient

from brasier.application.use_cases.get_burn_claim import GetBurnClaim
from brasier.application.use_cases.list_wallet_claims import ListWalletClaims
from brasier.application.use_cases.verify_burn import VerifyBurn
from brasier.config.settings import Settings
from brasier.di.dependencies import (
    get_get_burn_claim,
    get_list_wallet_claims,
    get_verify_burn,
)
from brasier.domain.exceptions import (
    OnChainFailureError,
    TransactionNotFoundError,
    UpstreamUnavailableError,
)
from brasier.infrastructure.monitoring.health_check import BrasierHealthCheck
from brasier.main import create_app
from brasier.presentation.api.routes.health import get_health_check
from shared.tests import LaborantTest
from tests.helpers.chain_fixtures import (
    MINT,
    OTHER_WALLET,
    WALLET,
    make_signature,
    parsed_tx,
)
from tests.helpers.in_memory_claim_ledger import InMemoryClaimLedger

SIGNATURE = make_signature(1)


class TestBurnRoutes(LaborantTest):
    """Integration tests for burn verification routes."""

    component_name = "brasier"
    test_category = "integration"

    def setup_test(self):
        self.settings = Settings(
            DATABASE_URL="sqlite+aiosqlite:///unused.db",
            SOLANA_RPC_URL="https://rpc.example.invalid",
            TOKEN_MINT_ADDRESS=MINT,
            ENV="test",
        )
        self.app = create_app(self.settings)
        self.ledger = InMemoryClaimLedger()
        self.chain_reader = AsyncMock()
        self.chain_reader.fetch_transaction.return_value = parsed_tx(
            signature=SIGNATURE
        )
        self.target_mint = MINT

        self.app.dependency_overrides[get_verify_burn] = lambda: VerifyBurn(
            chain_reader=self.chain_reader,
            claim_ledger=self.ledger,
            target_mint=self.target_mint,
            commitment="confirmed",
        )
        self.app.dependency_overrides[get_get_burn_claim] = lambda: GetBurnClaim(
            self.ledger
        )
        self.app.dependency_overrides[get_list_wallet_claims] = (
            lambda: ListWalletClaims(self.ledger)
        )

    def _client(self, raise_app_exceptions: bool = True) -> AsyncClient:
        transport = ASGITransport(
            app=self.app, raise_app_exceptions=raise_app_exceptions
        )
        return AsyncClient(transport=transport, base_url="http://test")

    async def _verify(self, body: dict, path: str = "/api/verify-burn"):
        async with self._client() as client:
            return await client.post(path, json=body)

    def _body(self, signature=SIGNATURE, wallet=WALLET, **extra) -> dict:
        return {"signature": signature, "userWallet": wallet, **extra}

    # ================================================================
    # POST /api/verify-burn
    # ================================================================

    async def test_verify_burn_success(self):
        """Test a valid burn returns amount and reward."""
        self.reporter.info("Testing successful verification", context="Test")

        response = await self._verify(self._body(requiredAmount=5))

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "amountBurned": 5.0,
            "signature": SIGNATURE,
            "reward": 500,
            "message": "Burn verified and recorded successfully",
        }
        assert "X-Request-ID" in response.headers

    async def test_replay_is_rejected(self):
        """Test the second submission of a signature is ALREADY_CLAIMED."""
        self.reporter.info("Testing replay over HTTP", context="Test")

        first = await self._verify(self._body())
        second = await self._verify(self._body())

        assert first.status_code == 200
        assert second.status_code == 400
        assert second.json() == {
            "success": False,
            "error": "Transaction already claimed",
            "errorKind": "ALREADY_CLAIMED",
        }
        assert self.chain_reader.fetch_transaction.await_count == 1

    async def test_signer_mismatch_is_forbidden(self):
        """Test a wallet that did not sign the transaction gets 403."""
        self.reporter.info("Testing signer mismatch", context="Test")

        response = await self._verify(self._body(wallet=OTHER_WALLET))

        assert response.status_code == 403
        assert response.json()["errorKind"] == "SIGNER_MISMATCH"
        assert SIGNATURE not in self.ledger.claims

    async def test_chain_errors_map_to_status(self):
        """Test chain reader failures map to their HTTP status."""
        self.reporter.info("Testing chain error mapping", context="Test")

        cases = [
            (TransactionNotFoundError(SIGNATURE), 404, "NOT_FOUND"),
            (OnChainFailureError(SIGNATURE, {"Custom": 1}), 400, "ON_CHAIN_FAILURE"),
            (
                UpstreamUnavailableError("connect to 10.0.0.7:8899 refused"),
                500,
                "UPSTREAM_UNAVAILABLE",
            ),
        ]

        for error, status_code, kind in cases:
            self.chain_reader.fetch_transaction.side_effect = error
            response = await self._verify(self._body())

            assert response.status_code == status_code, kind
            assert response.json()["errorKind"] == kind
            assert "10.0.0.7" not in response.text

    async def test_insufficient_amount(self):
        """Test a burn smaller than required is INSUFFICIENT_AMOUNT."""
        self.reporter.info("Testing insufficient amount", context="Test")

        response = await self._verify(self._body(requiredAmount="5.5"))

        assert response.status_code == 400
        assert response.json()["errorKind"] == "INSUFFICIENT_AMOUNT"
        assert self.ledger.claims == {}

    async def test_missing_fields_are_invalid_input(self):
        """Test missing signature or wallet is INVALID_INPUT."""
        self.reporter.info("Testing missing fields", context="Test")

        for body in ({"userWallet": WALLET}, {"signature": SIGNATURE}, {}):
            response = await self._verify(body)

            assert response.status_code == 400
            assert response.json()["errorKind"] == "INVALID_INPUT"

        self.chain_reader.fetch_transaction.assert_not_awaited()

    async def test_malformed_body_is_invalid_input(self):
        """Test schema validation errors keep the error shape."""
        self.reporter.info("Testing malformed body", context="Test")

        response = await self._verify(self._body(requiredAmount="lots"))

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["errorKind"] == "INVALID_INPUT"
        assert "requiredAmount" in body["error"]

    async def test_wrong_method(self):
        """Test GET on the verify route is 405 in the error shape."""
        self.reporter.info("Testing wrong method", context="Test")

        async with self._client() as client:
            response = await client.get("/api/verify-burn")

        assert response.status_code == 405
        assert response.json()["success"] is False

    async def test_misconfigured_mint(self):
        """Test a missing mint rejects every verification with 500."""
        self.reporter.info("Testing misconfigured mint", context="Test")

        self.target_mint = None
        response = await self._verify(self._body())

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Server misconfigured",
            "errorKind": "MISCONFIGURED",
        }
        self.chain_reader.fetch_transaction.assert_not_awaited()

    # ================================================================
    # POST /api/verify-unlock
    # ================================================================

    async def test_verify_unlock(self):
        """Test the unlock variant requires and checks the amount."""
        self.reporter.info("Testing unlock verification", context="Test")

        missing = await self._verify(self._body(), path="/api/verify-unlock")
        assert missing.status_code == 400
        assert missing.json()["errorKind"] == "INVALID_INPUT"

        response = await self._verify(
            self._body(amountToBurn="2.5"), path="/api/verify-unlock"
        )
        assert response.status_code == 200
        assert response.json()["amountBurned"] == 5.0

    # ================================================================
    # Claim lookups
    # ================================================================

    async def test_claim_lookup(self):
        """Test recorded claims can be fetched by signature and wallet."""
        self.reporter.info("Testing claim lookups", context="Test")

        await self.ledger.record_claim(SIGNATURE, WALLET, Decimal("2.5"))

        async with self._client() as client:
            single = await client.get(f"/api/burns/{SIGNATURE}")
            history = await client.get("/api/burns", params={"wallet": WALLET})
            unknown = await client.get(f"/api/burns/{make_signature(2)}")
            bad_limit = await client.get(
                "/api/burns", params={"wallet": WALLET, "limit": 0}
            )

        assert single.status_code == 200
        assert single.json()["walletAddress"] == WALLET
        assert single.json()["amountBurned"] == 2.5

        assert history.status_code == 200
        assert history.json()["count"] == 1
        assert history.json()["claims"][0]["signature"] == SIGNATURE

        assert unknown.status_code == 404
        assert unknown.json()["errorKind"] == "NOT_FOUND"

        assert bad_limit.status_code == 400

    async def test_unexpected_error_hides_internals(self):
        """Test unhandled exceptions become a generic 500."""
        self.reporter.info("Testing unhandled error", context="Test")

        broken = MagicMock()
        broken.execute = AsyncMock(side_effect=RuntimeError("pool exhausted"))
        self.app.dependency_overrides[get_get_burn_claim] = lambda: broken

        async with self._client(raise_app_exceptions=False) as client:
            response = await client.get(f"/api/burns/{SIGNATURE}")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Internal server error",
        }

    # ================================================================
    # Health & metrics
    # ================================================================

    async def test_health_probes(self):
        """Test liveness always passes and readiness follows the database."""
        self.reporter.info("Testing health probes", context="Test")

        database = MagicMock()
        database.health_check = AsyncMock(return_value=False)
        self.app.dependency_overrides[get_health_check] = lambda: (
            BrasierHealthCheck(database=database, verification_configured=True)
        )

        async with self._client() as client:
            live = await client.get("/api/health/live")
            ready = await client.get("/api/health/ready")

        assert live.status_code == 200
        assert live.json()["status"] == "healthy"
        assert ready.status_code == 503
        assert ready.json()["checks"]["database"]["status"] == "unhealthy"
        assert ready.json()["checks"]["verification"]["configured"] is True

    async def test_metrics_endpoint(self):
        """Test Prometheus metrics are exposed."""
        self.reporter.info("Testing metrics endpoint", context="Test")

        await self._verify(self._body())
        async with self._client() as client:
            response = await client.get("/metrics")

        assert response.status_code == 200
        assert "brasier_verifications_total" in response.text
        assert "brasier_http_requests_total" in response.text


if __name__ == "__main__":
    TestBurnRoutes.run_as_main()
