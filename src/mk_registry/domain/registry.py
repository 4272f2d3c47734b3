# src/mk_registry/domain/registry.py
"""OwnershipRegistry Protocol — interface contract for the external item registry.

Unit tests inject an in-memory fake that conforms to this Protocol.
The ledger never talks to a registry directly; it goes through RegistryGateway,
which also accepts a synchronous registry whose methods return plain values.
"""
from typing import Protocol


class OwnershipRegistryProtocol(Protocol):
    async def get_owner(self, item_id: int) -> str: ...

    async def transfer_ownership(self, item_id: int, new_owner: str) -> object: ...
