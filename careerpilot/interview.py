"""Rule-based interviewer replies used when the AI interview service is down."""
from __future__ import annotations

from typing import Any

# Turn count after which the canned interviewer wraps up
CLOSING_TURN = 6

GENERIC_QUESTION = (
    "I see. How would you handle a situation where you have a tight deadline "
    "and a critical bug is discovered?"
)
FOLLOW_UP_QUESTION = (
    "That's interesting. What was your specific role in that project, "
    "and what technologies did you use?"
)
CLOSING_REMARKS = (
    "Thank you for those insights. That concludes our mock interview for today. "
    "I've analyzed your responses and will provide detailed feedback in your "
    "dashboard shortly. Great job!"
)


def opening_question(role: str) -> str:
    return (
        f"Great! Let's start the interview for the {role} position. Can you tell me "
        "about a challenging project you've worked on recently?"
    )


def _latest_user_message(messages: list[dict[str, Any]]) -> str:
    for msg in reversed(messages):
        if msg.get("role", "user") == "user":
            return str(msg.get("content") or "").lower()
    return ""


def canned_reply(messages: list[dict[str, Any]], role: str) -> str:
    """Pick a reply by keyword on the candidate's last message, then by turn count.

    Keywords are plain substring checks, so "hi" also matches inside longer
    words such as "this".
    """
    last = _latest_user_message(messages)

    if "hello" in last or "hi" in last:
        return opening_question(role)
    if "project" in last or "worked on" in last:
        return FOLLOW_UP_QUESTION
    if len(messages) > CLOSING_TURN:
        return CLOSING_REMARKS
    return GENERIC_QUESTION
