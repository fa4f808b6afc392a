from flask import Blueprint, current_app, jsonify, request
from flask_login import login_required, current_user
from ...extensions import db
from ...models import Entry
from ...core import EntryDraft, expand_recurrence
from ...schemas import EntryCreate, EntryUpdate

entries_bp = Blueprint("entries", __name__, url_prefix="/api/entries")


def _owned_entry_or_404(entry_id):
    return Entry.query.filter_by(id=entry_id, user_id=current_user.id).first_or_404(
        description="Entry not found"
    )


@entries_bp.route("/add", methods=["POST"])
@login_required
def create_entry():
    data = EntryCreate.model_validate(request.get_json(silent=True))
    template = EntryDraft(
        owner_id=current_user.id,
        kind=data.kind,
        category=data.category,
        amount=data.amount,
        note=data.note,
        occurs_on=data.occurs_on,
    )
    period = data.recurrence.period if data.recurrence else None
    # monthly series run to the end of the template's own year
    drafts = expand_recurrence(template, period, data.occurs_on.year)

    rows = [Entry(**draft.as_row()) for draft in drafts]
    db.session.add_all(rows)
    db.session.commit()
    if period:
        current_app.logger.info("Expanded %s entry into %d rows for user %s", period, len(rows), current_user.id)
    return jsonify({
        "message": "Entry saved successfully",
        "entry": rows[0].to_dict() if rows else None,
        "entries": [row.to_dict() for row in rows],
    }), 201


@entries_bp.route("/", strict_slashes=False)
@login_required
def list_entries():
    entries = (
        Entry.query.filter_by(user_id=current_user.id)
        .order_by(Entry.occurs_on.desc(), Entry.id.desc())
        .all()
    )
    return jsonify([e.to_dict() for e in entries])


@entries_bp.route("/<int:entry_id>", methods=["PUT"])
@login_required
def update_entry(entry_id):
    entry = _owned_entry_or_404(entry_id)
    changes = EntryUpdate.model_validate(request.get_json(silent=True))
    for field, value in changes.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(entry, field, value)
    db.session.commit()
    return jsonify(entry.to_dict())


@entries_bp.route("/<int:entry_id>", methods=["DELETE"])
@login_required
def delete_entry(entry_id):
    entry = _owned_entry_or_404(entry_id)
    db.session.delete(entry)
    db.session.commit()
    return jsonify({"message": "Entry deleted successfully"})
