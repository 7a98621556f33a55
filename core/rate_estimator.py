"""
Interest rate estimators

The planner holds at most one estimator. StaticRateEstimator answers from the
fallback table; PromptedRateEstimator asks a language model through an injected
``complete(prompt) -> str`` callable and fills any gaps from the static table.
"""
import json
import logging
import re
from datetime import date
from typing import Callable, Dict, Optional, Protocol, Sequence

from config.constants import AccountType, EstimateConfidence
from core.estimation import estimate_interest_rate, normalize_balance
from data_manager.schema import FinancialAccount, InterestRateEstimate
from utils.formatters import fmt_rate

logger = logging.getLogger(__name__)

_JSON_BLOCK = re.compile(r"\{[\s\S]*\}")


class InterestRateEstimator(Protocol):
    def estimate_interest_rates(
        self, accounts: Sequence[FinancialAccount], current_date: Optional[date] = None
    ) -> Dict[str, InterestRateEstimate]:  # pragma: no cover - interface
        """Return estimates keyed by financial_account_id"""
        ...


class StaticRateEstimator:
    """Table-driven estimator; the default and the fallback for every other estimator"""

    def estimate(self, account: FinancialAccount) -> InterestRateEstimate:
        rate = estimate_interest_rate(account)
        try:
            kind = AccountType(account.type).label.lower()
        except ValueError:
            kind = str(account.type)
        return InterestRateEstimate(
            estimated_rate=rate,
            confidence=EstimateConfidence.LOW,
            reasoning=f"Typical rate for {kind} accounts: {fmt_rate(rate)}",
        )

    def estimate_interest_rates(
        self, accounts: Sequence[FinancialAccount], current_date: Optional[date] = None
    ) -> Dict[str, InterestRateEstimate]:
        return {a.financial_account_id: self.estimate(a) for a in accounts}


PROMPT_GUIDELINES = """Guidelines:
- Credit cards: typically 15-25% APR (store cards often higher, premium cards often lower)
- Lines of credit: typically 10-18% APR
- Mortgages: typically 6-8% APR
- Auto loans: typically 5-9% APR
- Student loans: typically 4-7% APR
- Personal loans: typically 8-15% APR
- Medical debt: often 0% on payment plans (CareCredit commonly offers 6-24 month interest-free periods)

Special cases to detect:
- CareCredit: usually 0% for 6, 12, 18, or 24 months, then ~26.99% APR with deferred interest
- Store cards (Amazon, Target, etc.): often 0% intro APR for 6-12 months, then 20-28% APR
- Balance transfer cards: often 0% intro APR for 12-21 months, then 15-25% APR

If you detect a likely promotional period based on the account name/institution:
- Set hasPromotionalPeriod to true
- Set promotionalRate (0 for interest-free)
- Set promotionalMonths (estimated duration)
- Set hasDeferredInterest to true if unpaid balance would accrue retroactive interest"""

ANSWER_FORMAT = """{
  "estimates": [
    {
      "accountId": "account-id-here",
      "estimatedRate": 0.1599,
      "confidence": "high|medium|low",
      "reasoning": "Brief explanation of why this rate",
      "marketContext": "Current market conditions affecting this rate",
      "hasPromotionalPeriod": false,
      "promotionalRate": null,
      "promotionalMonths": null,
      "hasDeferredInterest": false
    }
  ]
}"""


class PromptedRateEstimator:
    """Language-model estimator behind a plain text-completion callable"""

    def __init__(self, complete: Callable[[str], str], fallback: Optional[StaticRateEstimator] = None):
        self._complete = complete
        self._fallback = fallback or StaticRateEstimator()

    def build_prompt(self, accounts: Sequence[FinancialAccount], current_date: date) -> str:
        date_str = current_date.strftime("%B %d, %Y")
        rows = []
        for account in accounts:
            raw = account.raw_data or {}
            institution = raw.get("institution") if isinstance(raw.get("institution"), dict) else {}
            rows.append({
                "id": account.financial_account_id,
                "type": account.type,
                "balance": normalize_balance(account.current_balance) / 100,
                "name": account.name,
                "officialName": account.official_name,
                "institutionName": institution.get("name"),
            })

        return (
            f"You are a financial analyst estimating current market interest rates "
            f"for debt accounts as of {date_str}.\n\n"
            "For each account below, estimate the most likely current APR based on the "
            "account type, institution and account name, balance, and known promotional periods.\n\n"
            f"Accounts to analyze:\n{json.dumps(rows, indent=2)}\n\n"
            f"Provide your estimates in the following JSON format ONLY (no other text):\n{ANSWER_FORMAT}\n\n"
            f"{PROMPT_GUIDELINES}"
        )

    def parse_response(
        self, content: str, accounts: Sequence[FinancialAccount]
    ) -> Dict[str, InterestRateEstimate]:
        match = _JSON_BLOCK.search(content or "")
        if not match:
            logger.warning("No JSON found in AI response, using fallback")
            return self._fallback.estimate_interest_rates(accounts)

        try:
            parsed = json.loads(match.group(0))
            estimates = {
                str(item["accountId"]): _estimate_from_json(item)
                for item in parsed.get("estimates") or []
            }
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.error("Error parsing AI response: %s", exc)
            return self._fallback.estimate_interest_rates(accounts)

        for account in accounts:
            if account.financial_account_id not in estimates:
                estimates[account.financial_account_id] = self._fallback.estimate(account)
        return estimates

    def estimate_interest_rates(
        self, accounts: Sequence[FinancialAccount], current_date: Optional[date] = None
    ) -> Dict[str, InterestRateEstimate]:
        if not accounts:
            return {}
        prompt = self.build_prompt(accounts, current_date or date.today())
        try:
            content = self._complete(prompt)
        except Exception as exc:  # noqa: BLE001
            logger.error("Error estimating interest rates: %s", exc)
            return self._fallback.estimate_interest_rates(accounts)
        return self.parse_response(content, accounts)


def _estimate_from_json(item: dict) -> InterestRateEstimate:
    confidence = item.get("confidence")
    try:
        confidence = EstimateConfidence(confidence)
    except ValueError:
        confidence = EstimateConfidence.LOW
    months = item.get("promotionalMonths")
    promo_rate = item.get("promotionalRate")
    return InterestRateEstimate(
        estimated_rate=float(item["estimatedRate"]),
        confidence=confidence,
        reasoning=item.get("reasoning"),
        market_context=item.get("marketContext"),
        has_promotional_period=bool(item.get("hasPromotionalPeriod")),
        promotional_rate=float(promo_rate) if promo_rate is not None else None,
        promotional_months=int(months) if months else None,
        has_deferred_interest=bool(item.get("hasDeferredInterest")),
    )
