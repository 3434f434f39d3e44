from atividades import db


class Reminder(db.Model):
    __tablename__ = 'reminders'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    title = db.Column(db.String(200), nullable=False)
    date = db.Column(db.Date, nullable=False, index=True)
    description = db.Column(db.Text)

    def __repr__(self):
        return f'<Reminder {self.title} ({self.date})>'

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'userId': self.user_id,
            'title': self.title,
            'date': self.date.isoformat() if self.date else None,
            'description': self.description,
        }
