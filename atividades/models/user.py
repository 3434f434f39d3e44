import enum
from datetime import datetime

from flask_sqlalchemy import SQLAlchemy
from flask_login import UserMixin

db = SQLAlchemy()


class UserRole(str, enum.Enum):
    PUBLICADOR = 'publicador'
    PIONEIRO_AUXILIAR = 'pioneiro-auxiliar'
    PIONEIRO_REGULAR = 'pioneiro-regular'

    @property
    def label(self) -> str:
        return _ROLE_LABELS[self]

    @property
    def monthly_goal(self) -> int:
        return _ROLE_GOALS[self][0]

    @property
    def annual_goal(self) -> int:
        return _ROLE_GOALS[self][1]

    @classmethod
    def values(cls):
        return [role.value for role in cls]


_ROLE_LABELS = {
    UserRole.PUBLICADOR: 'Publicador',
    UserRole.PIONEIRO_AUXILIAR: 'Pioneiro Auxiliar',
    UserRole.PIONEIRO_REGULAR: 'Pioneiro Regular',
}

# (meta mensal, meta anual) em horas
_ROLE_GOALS = {
    UserRole.PUBLICADOR: (0, 0),
    UserRole.PIONEIRO_AUXILIAR: (30, 360),
    UserRole.PIONEIRO_REGULAR: (50, 600),
}


class User(UserMixin, db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(20), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    role = db.Column(db.String(30), nullable=False, default=UserRole.PUBLICADOR.value)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, onupdate=datetime.utcnow)

    sessions = db.relationship(
        'UserSession',
        backref='user',
        lazy='dynamic',
        cascade='all, delete-orphan',
    )
    activities = db.relationship(
        'Activity',
        backref='user',
        lazy='dynamic',
        cascade='all, delete-orphan',
    )
    reminders = db.relationship(
        'Reminder',
        backref='user',
        lazy='dynamic',
        cascade='all, delete-orphan',
    )

    @property
    def user_role(self) -> UserRole:
        try:
            return UserRole(self.role)
        except ValueError:
            return UserRole.PUBLICADOR

    def __repr__(self):
        return f'<User {self.username}>'

    def to_dict(self) -> dict:
        # password_hash nunca sai da API
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'role': self.role,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
