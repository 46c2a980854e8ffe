"""Fund protocol — owner of the strategy and recipient of withdrawals."""
from typing import Protocol


class Fund(Protocol):
    """The aggregator whose idle capital the strategy manages."""

    @property
    def address(self) -> str: ...

    def underlying(self) -> str: ...

    def governance(self) -> str: ...
