from flask import Blueprint, current_app, jsonify, request
from flask_login import login_required, current_user
from ...extensions import db
from ...models import User
from ...schemas import LoginIn, ProfileUpdateIn, RegisterIn
from ...tokens import issue_token

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


def _session_payload(user):
    return {"token": issue_token(user), "user": user.to_dict()}


@auth_bp.route("/register", methods=["POST"])
def register():
    data = RegisterIn.model_validate(request.get_json(silent=True))
    email = data.email.lower()
    if User.query.filter_by(email=email).first():
        return jsonify({"error": "Email already registered"}), 400
    user = User(username=data.username, email=email)
    user.set_password(data.password)
    db.session.add(user)
    db.session.commit()
    current_app.logger.info("Registered user %s", user.id)
    return jsonify(_session_payload(user))


@auth_bp.route("/login", methods=["POST"])
def login():
    data = LoginIn.model_validate(request.get_json(silent=True))
    user = User.query.filter_by(email=data.email.lower()).first()
    if user and user.check_password(data.password):
        return jsonify(_session_payload(user))
    return jsonify({"error": "Invalid credentials"}), 400


@auth_bp.route("/verify")
def verify():
    if current_user.is_authenticated:
        return jsonify({"valid": True})
    return jsonify({"valid": False}), 401


@auth_bp.route("/update-profile", methods=["PUT"])
@login_required
def update_profile():
    data = ProfileUpdateIn.model_validate(request.get_json(silent=True))
    user = current_user
    if not user.check_password(data.current_password):
        return jsonify({"error": "Current password is incorrect"}), 400

    if data.email and data.email.lower() != user.email:
        taken = User.query.filter(User.email == data.email.lower(), User.id != user.id).first()
        if taken:
            return jsonify({"error": "Email is already taken by another user"}), 400
        user.email = data.email.lower()
    if data.username:
        user.username = data.username
    if data.new_password:
        user.set_password(data.new_password)
    db.session.commit()
    return jsonify({"message": "Profile updated successfully", "user": user.to_dict()})


@auth_bp.route("/delete-user", methods=["DELETE"])
@login_required
def delete_user():
    user_id = current_user.id
    db.session.delete(db.session.get(User, user_id))
    db.session.commit()
    current_app.logger.info("Deleted user %s and all associated data", user_id)
    return jsonify({"message": "User and all associated data deleted successfully"})
