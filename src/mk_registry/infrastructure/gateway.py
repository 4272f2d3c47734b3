"""RegistryGateway — the single boundary between the ledger and the ownership registry.

Awaitable calls are bounded by a timeout; plain return values from a
synchronous registry are used as is. Any collaborator failure (exception,
timeout, or a returned ``Err`` result) surfaces as RegistryError.
"""
import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from src.mk_common.errors import RegistryError
from src.mk_common.result import Err
from src.mk_registry.domain.registry import OwnershipRegistryProtocol

logger = logging.getLogger(__name__)


class RegistryGateway:
    def __init__(self, registry: OwnershipRegistryProtocol, timeout_seconds: float) -> None:
        self._registry = registry
        self._timeout = timeout_seconds

    async def get_owner(self, item_id: int) -> str:
        owner = await self._call("get_owner", item_id, self._registry.get_owner, item_id)
        if not isinstance(owner, str):
            raise RegistryError(f"get_owner({item_id}) returned {owner!r}")
        return owner

    async def transfer_ownership(self, item_id: int, new_owner: str) -> None:
        outcome = await self._call(
            "transfer_ownership", item_id, self._registry.transfer_ownership, item_id, new_owner
        )
        if isinstance(outcome, Err):
            logger.error(
                "Registry refused transfer: item=%d new_owner=%s code=%d",
                item_id, new_owner, outcome.code,
            )
            raise RegistryError(f"transfer_ownership({item_id}) refused: {outcome.message}")

    async def _call(
        self, op: str, item_id: int, fn: Callable[..., Awaitable[Any] | Any], *args: Any
    ) -> Any:
        try:
            outcome = fn(*args)
            if not inspect.isawaitable(outcome):
                return outcome
            return await asyncio.wait_for(outcome, timeout=self._timeout)
        except RegistryError:
            raise
        except TimeoutError as exc:
            logger.error("Registry %s timed out: item=%d after %.1fs", op, item_id, self._timeout)
            raise RegistryError(f"{op}({item_id}) timed out after {self._timeout}s") from exc
        except Exception as exc:
            logger.error("Registry %s failed: item=%d error=%r", op, item_id, exc)
            raise RegistryError(f"{op}({item_id}) failed: {exc}") from exc
