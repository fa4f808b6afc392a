from datetime import datetime
from flask import Blueprint, abort, jsonify, request
from flask_login import login_required, current_user
from ...extensions import db
from ...models import WeeklyPlanLine
from ...schemas import plan_lines_adapter

weekly_plan_bp = Blueprint("weekly_plan", __name__, url_prefix="/api/weekly-plan")


@weekly_plan_bp.route("/", strict_slashes=False)
@login_required
def list_plan():
    rows = WeeklyPlanLine.query.filter_by(user_id=current_user.id).order_by(WeeklyPlanLine.id).all()
    return jsonify([row.to_dict() for row in rows])


@weekly_plan_bp.route("/update", methods=["POST"])
@login_required
def update_plan():
    lines = plan_lines_adapter.validate_python(request.get_json(silent=True))
    existing = {row.category: row for row in WeeklyPlanLine.query.filter_by(user_id=current_user.id).all()}

    # check every new category up front so a bad line leaves nothing half-written;
    # a category gets its icon from its first line in the batch
    iconed = set(existing)
    missing_icon = []
    for line in lines:
        if line.icon:
            iconed.add(line.category)
        elif line.category not in iconed:
            missing_icon.append(line.category)
    if missing_icon:
        abort(400, description=f"icon is required for new categories: {', '.join(missing_icon)}")

    results = []
    for line in lines:
        row = existing.get(line.category)
        if row is None:
            row = WeeklyPlanLine(user_id=current_user.id, category=line.category, icon=line.icon)
            db.session.add(row)
            existing[line.category] = row
        elif line.icon:
            row.icon = line.icon
        row.planned_amount = line.planned
        row.actual_amount = line.actual
        row.notes = line.notes
        row.updated_at = datetime.utcnow()
        results.append(row)
    db.session.commit()
    return jsonify([row.to_dict() for row in results])
