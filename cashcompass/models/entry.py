from datetime import date, datetime
from ..extensions import db


class Entry(db.Model):
    __tablename__ = "entries"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    kind = db.Column(db.String(10), nullable=False)  # income/expense
    category = db.Column(db.String(100), nullable=False)
    amount = db.Column(db.Float, nullable=False)
    note = db.Column(db.Text, default="")
    occurs_on = db.Column(db.Date, default=date.today, nullable=False)
    recurrence_period = db.Column(db.String(10))  # monthly/yearly, set only on expanded entries
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint("amount >= 0", name="ck_entry_amount_non_negative"),
        db.CheckConstraint("kind IN ('income', 'expense')", name="ck_entry_kind"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "type": self.kind,
            "category": self.category,
            "amount": self.amount,
            "note": self.note or "",
            "date": self.occurs_on.isoformat(),
            "recurrence": {"period": self.recurrence_period} if self.recurrence_period else None,
        }
