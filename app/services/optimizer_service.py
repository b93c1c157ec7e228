"""
Promotion optimizer - greedy round-based search for a cheaper cart.

Each round asks the catalog for the promotions that are cheaper than the
current best total and covered by its remaining products, then tries them
in catalog order against the accumulating best candidate. A promotion that
lowers the total is adopted immediately; nothing is ever backtracked.

The search stops when the catalog has nothing left to offer, when a whole
round brings no improvement, or when the round limit is hit. It is an
approximation: adopting a locally good promotion can rule out a cheaper
combination found only by a different order.
"""

import logging
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from app.exceptions import NotEnoughItemsError, ProductNotFoundError
from app.models import ProductAmount, Promotion
from app.services.metrics_service import record_optimizer_run

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 100


class OptimizerCandidate:
    """
    Partial solution: chosen promotions plus the products they left over.

    The price is computed once here from both lists and never updated on
    its own; every state change builds a new candidate.
    """

    __slots__ = ('_promotions', '_products', '_price')

    def __init__(self, promotions: Iterable[Promotion], products: Iterable[ProductAmount]):
        self._promotions: Tuple[Promotion, ...] = tuple(promotions)
        self._products: Tuple[ProductAmount, ...] = tuple(products)
        self._price = (
            sum((p.price for p in self._promotions), Decimal('0'))
            + sum((p.total_price for p in self._products), Decimal('0'))
        )

    def __repr__(self):
        codes = [p.code for p in self._promotions]
        return f"<OptimizerCandidate(promotions={codes}, products={len(self._products)}, price={self._price})>"

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def promotions(self) -> List[Promotion]:
        return list(self._promotions)

    @property
    def products(self) -> List[ProductAmount]:
        return list(self._products)

    def simulate(self, promotion: Promotion) -> 'OptimizerCandidate':
        """
        Candidate with ``promotion`` additionally applied.

        Raises:
            ProductNotFoundError, NotEnoughItemsError: from ``Promotion.consume``.
        """
        products = promotion.consume(self._products)
        return OptimizerCandidate(self._promotions + (promotion,), products)


class Optimizer:
    """Search driver over a coalesced product pool and a catalog."""

    def __init__(self, available_items: Iterable[ProductAmount], catalog, max_rounds: Optional[int] = None):
        self.available_items: List[ProductAmount] = list(available_items)
        self.catalog = catalog
        self.max_rounds = DEFAULT_MAX_ROUNDS if max_rounds is None else max_rounds
        self.candidate = OptimizerCandidate([], self.available_items)
        self.maximum_price: Decimal = self.candidate.price
        self.rounds = 0

    @classmethod
    def run(cls, pool: Iterable[ProductAmount], catalog, max_rounds: Optional[int] = None) -> Tuple[List[ProductAmount], List[Promotion]]:
        """Optimize ``pool`` against ``catalog``; returns (products, promotions)."""
        return cls(pool, catalog, max_rounds).get_optimal_products_promotions()

    def _round(self) -> Optional[bool]:
        """
        Run one search round.

        Returns None when no promotion applies, otherwise whether the best
        candidate improved.
        """
        possible_promotions = self.catalog.fetch_possible_promotions(
            self.candidate.products, self.candidate.price
        )
        if not possible_promotions:
            return None

        improved = False
        for promotion in possible_promotions:
            try:
                simulated = self.candidate.simulate(promotion)
            except (ProductNotFoundError, NotEnoughItemsError) as e:
                logger.debug(f"[OPTIMIZER] {promotion.code} discarded: {e.message}")
                continue

            if simulated.price < self.candidate.price:
                logger.debug(
                    f"[OPTIMIZER] round {self.rounds}: {promotion.code} "
                    f"{self.candidate.price} -> {simulated.price}"
                )
                self.candidate = simulated
                improved = True

        return improved

    def get_optimal_products_promotions(self) -> Tuple[List[ProductAmount], List[Promotion]]:
        """
        Return the best (remaining products, chosen promotions) found.

        Catalog failures propagate. A promotion whose simulation fails is
        skipped for that round and leaves the best candidate untouched.
        """
        while self.rounds < self.max_rounds:
            self.rounds += 1
            if not self._round():
                break
        else:
            logger.warning(
                f"[OPTIMIZER] stopped after {self.max_rounds} rounds at price {self.candidate.price}"
            )

        record_optimizer_run(self.rounds, len(self.candidate.promotions))
        logger.info(
            f"[OPTIMIZER] {len(self.candidate.promotions)} promotions in {self.rounds} rounds: "
            f"{self.maximum_price} -> {self.candidate.price}"
        )
        return self.candidate.products, self.candidate.promotions
