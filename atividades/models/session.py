from datetime import datetime

from atividades import db


class UserSession(db.Model):
    """Sessao de navegador persistida no banco (token opaco -> usuario)."""

    __tablename__ = 'sessions'

    token = db.Column(db.String(64), primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    expires_at = db.Column(db.DateTime, nullable=False, index=True)

    def __repr__(self):
        return f'<UserSession user={self.user_id} expires={self.expires_at}>'

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
