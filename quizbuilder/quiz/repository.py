"""
Storage access for quizzes and results.

Routes never touch the session directly: they ask ``get_repository()`` for
the repository bound to the current request's session. Every write commits
once; any SQLAlchemy failure rolls the session back and surfaces as a
``StorageError``.
"""
from contextlib import contextmanager
from datetime import datetime

from flask import current_app, g
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from quizbuilder import db
from quizbuilder.errors import NotFoundError, StorageError
from quizbuilder.quiz.models import Quiz, Question, Result


class QuizRepository:
    """Quiz and result persistence over a SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    @contextmanager
    def _storage_guard(self, action: str):
        try:
            yield
        except SQLAlchemyError as e:
            self.session.rollback()
            current_app.logger.exception(f"Storage failure while trying to {action}: {str(e)}")
            raise StorageError(e) from e

    @staticmethod
    def _build_questions(questions: list) -> list:
        # Order is always reassigned from list position
        return [Question(order=index, **fields) for index, fields in enumerate(questions, start=1)]

    def ping(self) -> None:
        """Run a trivial query to prove the database answers."""
        with self._storage_guard('reach the database'):
            self.session.execute(text("SELECT 1"))

    def list_quizzes(self) -> list:
        """All quizzes, newest first."""
        with self._storage_guard('list quizzes'):
            return (
                self.session.query(Quiz)
                .options(selectinload(Quiz.questions))
                .order_by(Quiz.created_at.desc())
                .all()
            )

    def find_quiz(self, quiz_id: str):
        with self._storage_guard(f'load quiz {quiz_id}'):
            return self.session.get(Quiz, quiz_id)

    def get_quiz(self, quiz_id: str) -> Quiz:
        """Load a quiz or raise NotFoundError."""
        quiz = self.find_quiz(quiz_id)
        if quiz is None:
            raise NotFoundError('Quiz not found')
        return quiz

    def create_quiz(self, title: str, questions: list) -> Quiz:
        """
        Create a quiz with its questions in one transaction.

        Args:
            title: Quiz title.
            questions: Normalized question field dicts, in display order.
        """
        with self._storage_guard('create quiz'):
            quiz = Quiz(title=title, questions=self._build_questions(questions))
            self.session.add(quiz)
            self.session.commit()
            return quiz

    def replace_quiz(self, quiz_id: str, title: str, questions: list) -> Quiz:
        """
        Replace a quiz's title and all of its questions.

        Prior questions are deleted before the new ones are inserted, so the
        new questions get fresh ids and orders 1..N.
        """
        quiz = self.get_quiz(quiz_id)
        with self._storage_guard(f'replace quiz {quiz_id}'):
            quiz.questions.clear()
            self.session.flush()
            quiz.title = title
            quiz.updated_at = datetime.utcnow()
            quiz.questions.extend(self._build_questions(questions))
            self.session.commit()
            return quiz

    def delete_quiz(self, quiz_id: str) -> None:
        """Delete a quiz and its questions. Its results are kept."""
        quiz = self.get_quiz(quiz_id)
        with self._storage_guard(f'delete quiz {quiz_id}'):
            self.session.delete(quiz)
            self.session.commit()

    def add_result(self, quiz_id: str, report) -> Result:
        """Persist a GradeReport as a new result for ``quiz_id``."""
        with self._storage_guard(f'save result for quiz {quiz_id}'):
            result = Result(
                quiz_id=quiz_id,
                total=report.total,
                correct_count=report.correct_count,
                percent=report.percent,
                answers=report.serialized_records(),
            )
            self.session.add(result)
            self.session.commit()
            return result

    def list_results(self, quiz_id: str) -> list:
        """Results recorded against ``quiz_id``, newest first."""
        with self._storage_guard(f'list results for quiz {quiz_id}'):
            return (
                self.session.query(Result)
                .filter(Result.quiz_id == quiz_id)
                .order_by(Result.created_at.desc())
                .all()
            )

    def list_results_with_titles(self) -> list:
        """
        All results, newest first, paired with their quiz title.

        The title is None when the quiz has since been deleted.
        """
        with self._storage_guard('list results'):
            return (
                self.session.query(Result, Quiz.title)
                .outerjoin(Quiz, Quiz.id == Result.quiz_id)
                .order_by(Result.created_at.desc())
                .all()
            )

    def get_result(self, result_id: str) -> Result:
        with self._storage_guard(f'load result {result_id}'):
            result = self.session.get(Result, result_id)
        if result is None:
            raise NotFoundError('Result not found')
        return result


def get_repository() -> QuizRepository:
    """Repository bound to the session of the current app context."""
    if 'quiz_repository' not in g:
        g.quiz_repository = QuizRepository(db.session)
    return g.quiz_repository
