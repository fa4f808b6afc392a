from datetime import datetime
from ..extensions import db


class WeeklyPlanLine(db.Model):
    __tablename__ = "weekly_plan_lines"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    category = db.Column(db.String(100), nullable=False)
    icon = db.Column(db.String(16), nullable=False)
    planned_amount = db.Column(db.Float, default=0.0)
    actual_amount = db.Column(db.Float, default=0.0)
    notes = db.Column(db.Text, default="")
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.UniqueConstraint("user_id", "category", name="uq_user_plan_category"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "category": self.category,
            "icon": self.icon,
            "planned": self.planned_amount,
            "actual": self.actual_amount,
            "notes": self.notes or "",
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
