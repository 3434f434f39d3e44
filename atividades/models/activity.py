import enum

from atividades import db


class ActivityType(str, enum.Enum):
    CAMPO = 'campo'
    TESTEMUNHO = 'testemunho'
    CARTAS = 'cartas'
    ESTUDO = 'estudo'

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def values(cls):
        return [activity_type.value for activity_type in cls]


class Activity(db.Model):
    __tablename__ = 'activities'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    type = db.Column(db.String(20), nullable=False)
    hours = db.Column(db.Numeric(4, 1), nullable=False)
    date = db.Column(db.Date, nullable=False, index=True)
    notes = db.Column(db.Text)

    __table_args__ = (
        db.Index('idx_activities_user_date', 'user_id', 'date'),
    )

    def __repr__(self):
        return f'<Activity {self.type} {self.hours}h ({self.date})>'

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'userId': self.user_id,
            'type': self.type,
            'hours': float(self.hours) if self.hours is not None else None,
            'date': self.date.isoformat() if self.date else None,
            'notes': self.notes,
        }
