import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging
from dataclasses import asdict
import time

import streamlit as st
import pandas as pd
import plotly.express as px

from advisor.breakdown import iter_expense_categories, top_expense_categories
from advisor.chat import ChatTurnController, ManualScheduler
from advisor.config import Settings
from advisor.domain import BudgetRecord, ProfileType, RecommendationStatus, Sender
from advisor.services import BudgetAnalysisService
from advisor.transforms import BUDGET_FIELDS, budget_from_form, build_profile, update_budget_field

settings = Settings.from_env()
logging.basicConfig(level=settings.log_level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

st.set_page_config(page_title="FinanceAI", layout="wide")

PROFILE_LABELS = {ProfileType.STUDENT: "Student", ProfileType.PROFESSIONAL: "Professional"}
BUDGET_INPUTS = [
    ("housing", "Housing", 1000.0),
    ("food", "Food", 400.0),
    ("transportation", "Transportation", 300.0),
    ("entertainment", "Entertainment", 200.0),
    ("utilities", "Utilities", 150.0),
    ("other", "Other Expenses", 200.0),
]
# Same figures as the input placeholders
EXAMPLE_BUDGET = {"income": 3000, **{field: placeholder for field, _, placeholder in BUDGET_INPUTS}}


def income_label(profile_type: ProfileType, monthly: bool = True) -> str:
    if profile_type == ProfileType.STUDENT:
        return "Monthly Budget"
    return "Monthly Income" if monthly else "Annual Income"


def new_chat(profile_type):
    scheduler = ManualScheduler()
    st.session_state.chat_scheduler = scheduler
    st.session_state.chat = ChatTurnController.from_settings(
        settings, profile=profile_type, scheduler=scheduler, greet=True
    )


def render_profile_form():
    st.title("🎯 Welcome to FinanceAI")
    st.caption("Let's personalize your financial journey")

    with st.form("profile_form"):
        name = st.text_input("What's your name?", placeholder="Enter your name")
        profile_type = st.radio(
            "I am a...",
            options=list(ProfileType),
            format_func=lambda p: PROFILE_LABELS[p],
            horizontal=True,
        )
        col1, col2 = st.columns(2)
        with col1:
            age = st.text_input("Age", placeholder="25")
        with col2:
            income = st.text_input("Monthly Budget / Annual Income", placeholder="1000")
        goals = st.text_area(
            "Financial Goals",
            placeholder="Build emergency fund, pay off student loans, start investing...",
        )
        submitted = st.form_submit_button("Start Your Financial Journey")

    if submitted:
        result = build_profile({
            "name": name,
            "profile_type": profile_type,
            "age": age,
            "income": income,
            "goals": goals,
        })
        if result.is_left():
            st.error(result.get_error()["message"])
            return
        profile = result.get_or_else(None)
        st.session_state.profile = profile
        st.session_state.editing_profile = False
        new_chat(profile.profile_type)
        st.rerun()


def render_chat(profile):
    chat: ChatTurnController = st.session_state.chat
    scheduler: ManualScheduler = st.session_state.chat_scheduler

    st.subheader("🤖 Personal Finance Assistant")
    st.caption(f"{PROFILE_LABELS[profile.profile_type]} Mode")

    for message in chat.messages:
        role = "user" if message.sender == Sender.USER else "assistant"
        with st.chat_message(role):
            st.write(message.text)
            st.caption(message.ts[11:16])

    text = st.chat_input(
        "Ask me about budgeting, saving, investing, or taxes...",
        disabled=chat.is_awaiting,
    )
    if text:
        chat.submit(text)
        if chat.is_awaiting:
            with st.spinner("Thinking..."):
                time.sleep(chat.response_delay)
                scheduler.run_pending()
        st.rerun()


def load_example_budget():
    record = budget_from_form(EXAMPLE_BUDGET)
    st.session_state.budget_record = record
    for field in BUDGET_FIELDS:
        st.session_state[f"b_{field}"] = float(getattr(record, field))


def render_steps(report):
    with st.expander("🔍 Analysis steps"):
        for step in report.steps:
            output = step["output"]
            rows = output if isinstance(output, list) else [output]
            st.markdown(f"**{step['step']}**")
            st.dataframe(pd.DataFrame([asdict(row) for row in rows]), hide_index=True)


def render_budget(profile):
    service = BudgetAnalysisService.from_settings(settings)

    st.subheader("💵 Budget Analyzer")
    st.button("Fill in an example budget", on_click=load_example_budget)

    record = st.session_state.get("budget_record", BudgetRecord())
    cols = st.columns(3)
    with cols[0]:
        raw = st.number_input(income_label(profile.profile_type), min_value=0.0, step=100.0, key="b_income")
        record = update_budget_field(record, "income", raw)
    for idx, (field, label, placeholder) in enumerate(BUDGET_INPUTS):
        with cols[(idx + 1) % 3]:
            raw = st.number_input(label, min_value=0.0, step=50.0, key=f"b_{field}",
                                  help=f"e.g. {placeholder:,.0f}")
            record = update_budget_field(record, field, raw)
    st.session_state.budget_record = record

    if st.button("Analyze My Budget", use_container_width=True):
        st.session_state.show_analysis = True

    report = service.analyze(record, profile.profile_type)
    if not (st.session_state.get("show_analysis") and report.has_income):
        return

    m = report.metrics
    k1, k2, k3 = st.columns(3)
    with k1:
        st.metric("Total Income", f"${record.income:,.0f}")
    with k2:
        st.metric("Total Expenses", f"${m.total_expenses:,.0f}")
    with k3:
        st.metric("Remaining", f"${m.remaining_budget:,.0f}",
                  delta="on track" if m.remaining_budget >= 0 else "over budget",
                  delta_color="normal" if m.remaining_budget >= 0 else "inverse")

    chart_col, rec_col = st.columns(2)
    with chart_col:
        st.markdown("#### Expense Breakdown")
        df = pd.DataFrame(list(iter_expense_categories(record)), columns=["Category", "Amount"])
        if not df.empty:
            fig = px.pie(df, values="Amount", names="Category", hole=0.4)
            fig.update_layout(height=320, margin=dict(t=10, b=10, l=10, r=10))
            st.plotly_chart(fig, use_container_width=True)
            top = ", ".join(f"{label} (${amount:,.0f})" for label, amount in top_expense_categories(record, 3))
            st.caption(f"Biggest expenses: {top}")
        else:
            st.info("No expenses entered yet.")

    with rec_col:
        st.markdown("#### Budget vs. Ideal")
        for rec in report.recommendations:
            icon = "✅" if rec.status == RecommendationStatus.GOOD else "⚠️"
            pct = f" **{rec.percentage}%**" if rec.percentage is not None else ""
            st.markdown(f"{icon} **{rec.title}**{pct}")
            st.caption(rec.description)

    render_steps(report)


def render_dashboard(profile):
    head, button = st.columns([4, 1])
    with head:
        st.title(f"Welcome back, {profile.name}!")
        st.caption("Your personal finance assistant is ready to help")
    with button:
        if st.button("⚙️ Edit Profile"):
            st.session_state.editing_profile = True
            st.rerun()

    s1, s2, s3 = st.columns(3)
    with s1:
        st.metric("Profile Type", PROFILE_LABELS[profile.profile_type])
    with s2:
        st.metric(income_label(profile.profile_type, monthly=False), f"${profile.income:,.0f}")
    with s3:
        st.metric("Age", profile.age)

    if profile.goals:
        st.markdown("### 🎯 Your Financial Goals")
        st.write(profile.goals)

    chat_tab, budget_tab = st.tabs(["💬 AI Assistant", "🧮 Budget Analyzer"])
    with chat_tab:
        render_chat(profile)
    with budget_tab:
        render_budget(profile)


profile = st.session_state.get("profile")
if profile is None or st.session_state.get("editing_profile"):
    render_profile_form()
else:
    render_dashboard(profile)
