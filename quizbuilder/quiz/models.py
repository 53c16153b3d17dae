"""
Database models for quiz functionality.

Supports three question types:
- BOOLEAN: true/false questions, correct answer "true" or "false"
- INPUT: free text questions, one expected answer
- CHECKBOX: several options, any subset of them may be correct
"""
import json
import uuid
from datetime import datetime
from quizbuilder import db


BOOLEAN = 'BOOLEAN'
INPUT = 'INPUT'
CHECKBOX = 'CHECKBOX'
QUESTION_TYPES = (BOOLEAN, INPUT, CHECKBOX)
TITLE_MAX_LENGTH = 255


def generate_id() -> str:
    """Opaque primary key; never reused after a delete."""
    return uuid.uuid4().hex


def _isoformat(value):
    """Timestamps are stored as naive UTC; serialize them with an explicit Z."""
    return f"{value.isoformat(timespec='milliseconds')}Z" if value else None


class Quiz(db.Model):
    """
    Model for quizzes.

    A quiz owns its questions: they are created with it, replaced with it
    and deleted with it.
    """
    __tablename__ = "quizzes"

    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    title = db.Column(db.String(TITLE_MAX_LENGTH), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    questions = db.relationship(
        "Question",
        backref="quiz",
        cascade="all, delete-orphan",
        order_by="Question.order",
    )

    def __repr__(self) -> str:
        return f"<Quiz {self.id}: {self.title}>"

    def get_question_count(self) -> int:
        """Get total number of questions."""
        return len(self.questions)

    def to_summary(self) -> dict:
        """Listing representation, without questions."""
        return {
            'id': self.id,
            'title': self.title,
            'createdAt': _isoformat(self.created_at),
            'questionCount': self.get_question_count(),
        }

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
            'questions': [question.to_dict() for question in self.questions],
        }


class Question(db.Model):
    """
    Model for quiz questions.

    ``options`` is only meaningful for CHECKBOX questions and is empty for
    the other types. ``correct_answers`` always holds a list of strings:
    one element for BOOLEAN and INPUT, a subset of ``options`` for CHECKBOX.
    """
    __tablename__ = "quiz_questions"

    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    quiz_id = db.Column(db.String(32), db.ForeignKey("quizzes.id", ondelete='CASCADE'), nullable=False, index=True)
    question_type = db.Column(db.String(16), nullable=False)
    question_text = db.Column(db.Text, nullable=False)
    options = db.Column(db.JSON, nullable=False, default=list)
    correct_answers = db.Column(db.JSON, nullable=False, default=list)
    order = db.Column(db.Integer, nullable=False)  # 1-based, dense per quiz

    __table_args__ = (
        db.UniqueConstraint('quiz_id', 'order', name='uq_quiz_questions_quiz_order'),
    )

    def __repr__(self) -> str:
        return f"<Question {self.id}: {self.question_type}>"

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'quizId': self.quiz_id,
            'type': self.question_type,
            'text': self.question_text,
            'options': list(self.options or []),
            'correct': list(self.correct_answers or []),
            'order': self.order,
        }


class Result(db.Model):
    """
    Model for one graded submission.

    ``quiz_id`` is not a foreign key: results outlive the quiz
    they were taken against. ``answers`` holds one JSON-encoded
    ``{"questionId", "submitted"}`` record per question.
    """
    __tablename__ = "quiz_results"

    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    quiz_id = db.Column(db.String(32), nullable=False, index=True)
    total = db.Column(db.Integer, nullable=False)
    correct_count = db.Column(db.Integer, nullable=False)
    percent = db.Column(db.Float, nullable=False)  # Unrounded
    answers = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Result {self.id}: Quiz {self.quiz_id}, {self.correct_count}/{self.total}>"

    def decoded_answers(self) -> list:
        """Decode the stored per-question records."""
        return [json.loads(record) for record in (self.answers or [])]

    def to_summary(self) -> dict:
        return {
            'id': self.id,
            'quizId': self.quiz_id,
            'createdAt': _isoformat(self.created_at),
            'total': self.total,
            'correctCount': self.correct_count,
            'percent': self.percent,
        }

    def to_dict(self) -> dict:
        data = self.to_summary()
        data['answers'] = self.decoded_answers()
        return data
