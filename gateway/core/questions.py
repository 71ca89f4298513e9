from __future__ import annotations

from typing import List

from gateway.models import Question, QuestionOption


IMAGE_ROOT = "/images/psychometric"


def _options(*entries: tuple) -> List[QuestionOption]:
    return [
        QuestionOption(id=option_id, imageUrl=f"{IMAGE_ROOT}/{image}.jpg", label=label)
        for option_id, image, label in entries
    ]


QUESTIONS: List[Question] = [
    Question(
        id=1,
        type="visual-choice",
        question="Which image best represents how you approach challenges?",
        options=_options(
            ("a", "challenge_methodical", "Methodical approach"),
            ("b", "challenge_creative", "Creative approach"),
            ("c", "challenge_collaborative", "Collaborative approach"),
            ("d", "challenge_instinctive", "Instinctive approach"),
        ),
    ),
    Question(
        id=2,
        type="scenario",
        question="In a business setting with limited resources, which path would you choose?",
        options=_options(
            ("a", "business_innovative", "Find an innovative workaround"),
            ("b", "business_methodical", "Carefully allocate existing resources"),
            ("c", "business_partnership", "Seek partnerships to pool resources"),
            ("d", "business_pivot", "Pivot to a less resource-intensive approach"),
        ),
    ),
    Question(
        id=3,
        type="visual-choice",
        question="Which workspace environment would you be most productive in?",
        options=_options(
            ("a", "workspace_organized", "Organized and structured"),
            ("b", "workspace_creative", "Creative and stimulating"),
            ("c", "workspace_collaborative", "Open and collaborative"),
            ("d", "workspace_minimal", "Minimal and focused"),
        ),
    ),
    Question(
        id=4,
        type="scenario",
        question="When faced with a new market opportunity, how would you respond?",
        options=_options(
            ("a", "opportunity_research", "Conduct extensive research"),
            ("b", "opportunity_quick", "Move quickly to capture market share"),
            ("c", "opportunity_cautious", "Test the waters with minimal investment"),
            ("d", "opportunity_partners", "Find partners with complementary strengths"),
        ),
    ),
    Question(
        id=5,
        type="visual-choice",
        question="Which image best represents your approach to financial management?",
        options=_options(
            ("a", "finance_growth", "Focus on growth"),
            ("b", "finance_balance", "Balanced approach"),
            ("c", "finance_conservative", "Conservative and careful"),
            ("d", "finance_innovative", "Innovative funding methods"),
        ),
    ),
]


def list_questions() -> List[dict]:
    return [question.model_dump(by_alias=True) for question in QUESTIONS]
