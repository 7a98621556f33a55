"""Payoff order by strategy"""
from typing import List, Optional, Sequence

from config.constants import StrategyKind
from data_manager.schema import DebtAccount


def order_debts(
    debts: Sequence[DebtAccount],
    strategy: StrategyKind,
    custom_order: Optional[Sequence[str]] = None,
) -> List[DebtAccount]:
    """
    Return debts in processing order. Sorting is stable, so ties keep input order.

    avalanche: descending nominal interest rate (promotional rates are ignored)
    snowball:  ascending balance
    custom:    ids in custom_order first, in that order; unlisted ids after, in input order
    """
    strategy = StrategyKind(strategy)

    if strategy == StrategyKind.AVALANCHE:
        return sorted(debts, key=lambda d: d.interest_rate, reverse=True)

    if strategy == StrategyKind.SNOWBALL:
        return sorted(debts, key=lambda d: d.balance)

    if not custom_order:
        return list(debts)
    position = {debt_id: i for i, debt_id in reversed(list(enumerate(custom_order)))}
    unlisted = len(position)
    return sorted(debts, key=lambda d: position.get(d.id, unlisted))
