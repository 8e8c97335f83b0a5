import random
from typing import Dict, Optional

from advisor.config import Settings
from advisor.domain import FinanceTopic, ProfileType

# topic -> profile (None = no profile set yet) -> answer
RESPONSES: Dict[FinanceTopic, Dict[Optional[ProfileType], str]] = {
    FinanceTopic.BUDGET: {
        ProfileType.STUDENT: (
            "As a student, I recommend the 50/30/20 rule adapted for your situation: "
            "50% for needs (tuition, books, food), 30% for wants (entertainment, dining out), "
            "and 20% for savings and debt repayment. Start with even $25/month in savings!"
        ),
        ProfileType.PROFESSIONAL: (
            "For professionals, I suggest the 50/30/20 rule: 50% needs, 30% wants, "
            "20% savings/investments. Consider increasing savings to 25-30% if possible "
            "for faster wealth building."
        ),
        None: (
            "A good starting point is the 50/30/20 rule: 50% of your income for needs, "
            "30% for wants and 20% for savings or paying down debt. Adjust the split once "
            "you know where your money actually goes."
        ),
    },
    FinanceTopic.INVEST: {
        ProfileType.STUDENT: (
            "Great question! As a student, start simple: open a Roth IRA and invest in "
            "low-cost index funds. Even $50/month can grow significantly over time. "
            "Focus on building the habit now!"
        ),
        ProfileType.PROFESSIONAL: (
            "For professionals, diversify with a mix of 401(k), IRA, and taxable accounts. "
            "Consider index funds, target-date funds, and individual stocks. Aim to invest "
            "15-20% of your income."
        ),
        None: (
            "Investing works best when it's simple and regular: low-cost index funds in a "
            "tax-advantaged account, with a fixed amount invested every month. Build an "
            "emergency fund first so you never have to sell in a hurry."
        ),
    },
    FinanceTopic.SAVE: {
        ProfileType.STUDENT: (
            "Building savings as a student is crucial! Start with a $500 emergency fund, "
            "then work toward 3 months of expenses. Use high-yield savings accounts and "
            "automate transfers."
        ),
        ProfileType.PROFESSIONAL: (
            "Build a 3-6 month emergency fund first, then focus on retirement savings. "
            "Consider high-yield savings accounts and money market accounts for better returns."
        ),
        None: (
            "Start by building an emergency fund that covers a few months of expenses, "
            "keep it in a high-yield savings account and automate a transfer on payday."
        ),
    },
    FinanceTopic.TAX: {
        ProfileType.STUDENT: (
            "Student tax tips: Don't forget the American Opportunity Tax Credit (up to $2,500), "
            "deduct student loan interest, and file even if you didn't earn much - "
            "you might get money back!"
        ),
        ProfileType.PROFESSIONAL: (
            "Maximize tax-advantaged accounts like 401(k) and IRA. Consider tax-loss harvesting, "
            "HSA contributions, and whether itemizing vs. standard deduction saves more."
        ),
        None: (
            "Use tax-advantaged accounts where you can, check which credits and deductions "
            "apply to you, and always file on time - even a small refund is worth claiming."
        ),
    },
}

GENERAL_RESPONSES = (
    "I'm here to help with your personal finance questions! Feel free to ask about "
    "budgeting, saving, investing, or taxes.",
    "That's a great financial question! Let me provide some personalized advice based "
    "on your situation.",
    "Financial planning is important at any stage of life. What specific area would "
    "you like to focus on?",
)


def greeting(profile: Optional[ProfileType]) -> str:
    if profile:
        return (
            f"Hi! I'm your personal finance assistant. I see you're a {ProfileType(profile).value}. "
            "I can help you with budgeting, saving, investing, and tax planning tailored to "
            "your situation. What would you like to know?"
        )
    return (
        "Hi! I'm your personal finance assistant. I can help you with budgeting, saving, "
        "investing, and tax planning. What would you like to know?"
    )


class ResponseSelector:
    """Picks the canned answer for a topic and profile.

    Only the general fallback is random, drawn from ``rng`` so a seeded
    ``random.Random`` reproduces the same sequence.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResponseSelector":
        return cls(random.Random(settings.random_seed))

    def select(self, topic: FinanceTopic, profile: Optional[ProfileType] = None) -> str:
        topic = FinanceTopic(topic)
        if topic == FinanceTopic.GENERAL:
            return self.rng.choice(GENERAL_RESPONSES)
        key = ProfileType(profile) if profile else None
        return RESPONSES[topic][key]
