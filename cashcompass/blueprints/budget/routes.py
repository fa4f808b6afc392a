from datetime import datetime
from flask import Blueprint, current_app, jsonify, request
from flask_login import login_required, current_user
from ...extensions import db
from ...models import Budget, Entry
from ...core import EXPENSE, evaluate_budget, summarize, week_window
from ...schemas import BudgetSetIn

budget_bp = Blueprint("budget", __name__, url_prefix="/api/budget")


def period_expense(user_id):
    """Expense total the ceiling is measured against, per BUDGET_SCOPE."""
    query = Entry.query.filter_by(user_id=user_id, kind=EXPENSE)
    if current_app.config.get("BUDGET_SCOPE", "week") == "all":
        return summarize(query.all(), None).expense
    window = week_window(datetime.now())
    rows = query.filter(Entry.occurs_on >= window.start.date(), Entry.occurs_on < window.end.date()).all()
    return summarize(rows, window).expense


@budget_bp.route("/set", methods=["POST"])
@login_required
def set_budget():
    data = BudgetSetIn.model_validate(request.get_json(silent=True))
    budget = Budget.query.filter_by(user_id=current_user.id).first()
    if budget:
        budget.set_limit(data.amount)
    else:
        budget = Budget(user_id=current_user.id, limit_amount=data.amount, notified=False)
        db.session.add(budget)
    db.session.commit()
    return jsonify(budget.to_dict())


@budget_bp.route("/", strict_slashes=False)
@login_required
def budget_status():
    budget = Budget.query.filter_by(user_id=current_user.id).first()
    if not budget:
        return jsonify({"amount": 0, "expense": 0, "progress": 0, "notify": False})

    expense = period_expense(current_user.id)
    status = evaluate_budget(budget.limit_amount, expense, budget.notified)
    if status.notified != budget.notified:
        budget.notified = status.notified
        db.session.commit()
    return jsonify({
        "amount": budget.limit_amount,
        "expense": expense,
        "progress": status.utilization,
        "notify": status.should_notify,
    })
