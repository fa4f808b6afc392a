from ..extensions import db


class Budget(db.Model):
    __tablename__ = "budgets"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, unique=True)
    limit_amount = db.Column(db.Float, nullable=False)
    notified = db.Column(db.Boolean, nullable=False, default=False)

    def set_limit(self, limit_amount):
        # a new ceiling re-arms the approaching-limit notification
        self.limit_amount = limit_amount
        self.notified = False

    def to_dict(self):
        return {"amount": self.limit_amount, "notified": bool(self.notified)}
