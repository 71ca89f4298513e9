"""Canned content served when the provider is missing or failing."""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from gateway.models import PsychometricResult


FINANCIAL_RESPONSES: Dict[str, str] = {
    "budget": (
        "Creating a budget is simple! Start by tracking your income and expenses for a "
        "month. Then, categorize your expenses (housing, food, transportation, etc.) and "
        "set spending limits for each category. Aim to save at least 10% of your income if "
        "possible. Review and adjust your budget regularly."
    ),
    "saving": (
        "To save money with a low income, try these tips: 1) Track every expense, 2) Cut "
        "unnecessary subscriptions, 3) Use cash instead of cards to be more mindful of "
        "spending, 4) Cook at home instead of eating out, 5) Look for free entertainment "
        "options, 6) Consider a side hustle for extra income."
    ),
    "debt": (
        "To manage debt effectively: 1) List all your debts with interest rates, 2) Pay "
        "minimum payments on all debts, 3) Put extra money toward the highest-interest debt "
        "first, 4) Consider debt consolidation if you have good credit, 5) Contact "
        "creditors to negotiate lower rates, 6) Create a budget to avoid taking on more debt."
    ),
    "investing": (
        "Start investing with little money by: 1) Using micro-investing apps like Acorns or "
        "Stash, 2) Contributing to an employer-matched retirement plan if available, 3) "
        "Looking into low-cost index funds with low minimum investments, 4) Setting up "
        "automatic transfers of small amounts regularly, 5) Reinvesting any dividends you earn."
    ),
    "emergency": (
        "An emergency fund is money set aside for unexpected expenses like medical bills, "
        "car repairs, or job loss. Aim to save 3-6 months of essential expenses. Start "
        "small with a goal of ₹5,000-₹10,000, then build from there. Keep this money in a "
        "separate savings account that's easily accessible but not connected to your "
        "checking account."
    ),
    "default": (
        "To improve your financial situation, focus on creating a budget, reducing "
        "expenses, paying down debt, and building an emergency fund. Start small and be "
        "consistent with your financial habits. Every small step counts toward building a "
        "more secure financial future."
    ),
}

# Checked in order; first match wins.
KEYWORD_CATEGORIES: Sequence[Tuple[Tuple[str, ...], str]] = (
    (("budget",), "budget"),
    (("save", "saving"), "saving"),
    (("debt",), "debt"),
    (("invest",), "investing"),
    (("emergency",), "emergency"),
)


def match_category(message: str) -> str:
    lowered = (message or "").lower()
    for keywords, category in KEYWORD_CATEGORIES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return "default"


def fallback_chat_response(message: str) -> str:
    return FINANCIAL_RESPONSES[match_category(message)]


def fallback_analysis() -> PsychometricResult:
    return PsychometricResult(
        score=7,
        strengths=[
            "Problem-solving abilities",
            "Adaptability to changing situations",
            "Willingness to learn new skills",
        ],
        areasForDevelopment=[
            "Strategic planning",
            "Financial management",
            "Delegation of responsibilities",
        ],
        advice=(
            "Focus on developing a structured approach to business planning. Consider "
            "taking courses on financial literacy and management."
        ),
        resources=[
            "Small Business Administration (SBA) courses",
            "Local entrepreneurship workshops",
            "Online financial planning tools",
        ],
    )
