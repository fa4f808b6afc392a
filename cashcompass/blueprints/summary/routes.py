from datetime import datetime
from flask import Blueprint, jsonify
from flask_login import login_required, current_user
from ...models import Entry
from ...core import summarize, week_window
from ...services.ai_summary import weekly_comment

summary_bp = Blueprint("summary", __name__, url_prefix="/api/summary")


@summary_bp.route("/weekly")
@login_required
def weekly_summary():
    now = datetime.now()
    current_week = week_window(now)
    previous_week = current_week.shift(-1)

    entries = Entry.query.filter(
        Entry.user_id == current_user.id,
        Entry.occurs_on >= previous_week.start.date(),
        Entry.occurs_on < current_week.end.date(),
    ).all()
    current = summarize(entries, current_week)
    previous = summarize(entries, previous_week)

    return jsonify({
        "currentWeek": current.as_dict(),
        "previousWeek": previous.as_dict(),
        "balance": current.savings,
        "aiComment": weekly_comment(current, previous),
    })
