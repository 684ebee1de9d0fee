from app import db
from app.utils.security import hash_password, verify_password
from flask_login import UserMixin
from datetime import datetime


class Admin(UserMixin, db.Model):
    __tablename__ = 'admins'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False)
    password_hash = db.Column(db.String(128), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.now)

    def set_password(self, password):
        self.password_hash = hash_password(password)

    def check_password(self, password):
        if not self.password_hash or not password:
            return False
        try:
            return verify_password(password, self.password_hash)
        except (ValueError, TypeError, AttributeError):
            return False

    def __repr__(self):
        return f'<Admin {self.username}>'
