import requests
from flask import current_app

PLACEHOLDER = "AI insight is not available right now."
EMPTY_REPLY = "No AI insight available."


def build_prompt(current, previous):
    return (
        f"This week: Income ${current.income:.2f}, Expense ${current.expense:.2f}\n"
        f"Last week: Income ${previous.income:.2f}, Expense ${previous.expense:.2f}\n"
        "Write a short, human-friendly summary comparing both weeks, "
        "and provide a suggestion for improvement."
    )


def weekly_comment(current, previous):
    """Ask the LLM for a comment on two weekly ``Totals``; never raises.

    Any failure (no key, HTTP error, rate limit, timeout, odd payload) is
    logged and replaced by a placeholder so the numeric summary still goes out.
    """
    config = current_app.config
    if not config.get("AI_SUMMARY_ENABLED"):
        return PLACEHOLDER
    api_key = config.get("OPENROUTER_API_KEY")
    if not api_key:
        current_app.logger.warning("OPENROUTER_API_KEY is not set; skipping AI summary")
        return PLACEHOLDER

    try:
        response = requests.post(
            config["AI_SUMMARY_URL"],
            headers={"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"},
            json={
                "model": config["AI_SUMMARY_MODEL"],
                "messages": [{"role": "user", "content": build_prompt(current, previous)}],
            },
            timeout=config["AI_SUMMARY_TIMEOUT"],
        )
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as exc:
        current_app.logger.warning("AI summary request failed: %s", exc)
        return PLACEHOLDER

    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        current_app.logger.warning("AI summary response had no message content")
        return PLACEHOLDER
    return content.strip() if isinstance(content, str) and content.strip() else EMPTY_REPLY
