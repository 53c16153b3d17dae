"""
Flask CLI commands.

    flask --app quizbuilder init-db
    flask --app quizbuilder seed
"""
import click
from flask import Flask

from quizbuilder import db

SAMPLE_QUIZ = {
    'title': 'JavaScript Basics',
    'questions': [
        {
            'type': 'BOOLEAN',
            'text': 'JavaScript is a compiled language',
            'correct': ['false'],
        },
        {
            'type': 'INPUT',
            'text': 'What does DOM stand for?',
            'correct': ['Document Object Model'],
        },
        {
            'type': 'CHECKBOX',
            'text': 'Which are JavaScript data types?',
            'options': ['String', 'Number', 'Boolean', 'Object', 'Array', 'Function'],
            'correct': ['String', 'Number', 'Boolean', 'Object'],
        },
        {
            'type': 'BOOLEAN',
            'text': 'JavaScript can only run in browsers',
            'correct': ['false'],
        },
        {
            'type': 'INPUT',
            'text': 'What keyword is used to declare a variable in modern JavaScript?',
            'correct': ['let'],
        },
    ],
}


def register_commands(app: Flask) -> None:
    """Attach the management commands to the app's CLI."""

    @app.cli.command("init-db")
    def init_db():
        """Create all database tables."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("seed")
    def seed():
        """Insert the sample "JavaScript Basics" quiz."""
        from quizbuilder.quiz.authoring import normalize_quiz_payload
        from quizbuilder.quiz.repository import QuizRepository

        payload = normalize_quiz_payload(SAMPLE_QUIZ)
        quiz = QuizRepository(db.session).create_quiz(payload['title'], payload['questions'])
        click.echo(f"Created quiz {quiz.id}: {quiz.title} ({len(payload['questions'])} questions)")
