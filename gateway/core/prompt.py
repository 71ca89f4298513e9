from __future__ import annotations

import json
from typing import Any, Sequence

from langchain_core.prompts import PromptTemplate


FINANCIAL_CONTEXT = (
    "You are a helpful financial planning assistant for microfinance customers and "
    "individuals from underserved communities in India. Provide personalized, simple, "
    "and practical financial advice tailored to the Indian context.\n\n"
    "Consider these Indian-specific factors:\n"
    "- Refer to currency in INR or Rupees (₹), never use $ signs\n"
    "- Mention relevant Indian financial schemes like Jan Dhan Yojana, PM Jeevan Jyoti "
    "Bima Yojana, Atal Pension Yojana, etc. when appropriate\n"
    "- Reference Indian financial institutions like SBI, post offices, small finance "
    "banks, and microfinance institutions\n"
    "- Consider the reality of the informal economy and daily wage workers\n"
    "- Acknowledge cultural aspects like family financial interdependence and gold as "
    "a store of value\n"
    "- Mention digital payment options popular in India like UPI, BHIM, Google Pay, "
    "PhonePe, etc.\n\n"
    "Focus on basic financial concepts, budgeting, saving, and responsible borrowing. "
    "Avoid complex investment strategies and focus on actionable, accessible advice for "
    "people with limited resources. Be empathetic and considerate of financial "
    "constraints while remaining positive and empowering. Use simple language and avoid "
    "jargon. Be conversational and friendly in your tone."
)

FINANCIAL_PROMPT = PromptTemplate.from_template(
    "User Question: {question}\n\nContext: {context}"
)

PSYCHOMETRIC_PROMPT = PromptTemplate.from_template(
    "Please analyze these psychometric test responses to assess entrepreneurial potential.\n\n"
    "Response Data:\n"
    "{responses}\n\n"
    "Please provide:\n"
    "1. An overall entrepreneurial potential score (1-10)\n"
    "2. Top 3 strengths\n"
    "3. Top 3 areas for development\n"
    "4. Specific actionable advice\n"
    "5. Suggested resources or next steps\n\n"
    "Format the response as JSON with these exact keys: "
    "score, strengths, areasForDevelopment, advice, resources"
)

PROBE_PROMPT = "Hello, please respond with 'API is working' if you can see this message."


def build_financial_prompt(message: str) -> str:
    return FINANCIAL_PROMPT.format(question=message, context=FINANCIAL_CONTEXT)


def build_psychometric_prompt(responses: Sequence[Any]) -> str:
    payload = json.dumps(list(responses), indent=2, ensure_ascii=False, default=str)
    return PSYCHOMETRIC_PROMPT.format(responses=payload)
