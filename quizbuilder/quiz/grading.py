"""
Grading engine for quiz submissions.

Submitted answers arrive as either a single string or a list of strings per
question. They are parsed once, at the request boundary, into
``SingleAnswer`` / ``MultipleAnswers`` values; ``grade`` then compares them
with the stored correct answers:

- CHECKBOX: the set of submitted values must equal the set of correct values
- BOOLEAN and INPUT: only the first submitted value is compared with the
  first correct value

Every string is trimmed before comparison, nothing is case-folded, and a
question scores all or nothing. ``grade`` never raises on malformed input.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Union

from quizbuilder.quiz.models import CHECKBOX


@dataclass(frozen=True)
class SingleAnswer:
    """One typed or selected value."""
    value: str

    def as_list(self) -> list[str]:
        return [self.value]


@dataclass(frozen=True)
class MultipleAnswers:
    """Zero or more selected values, in submission order."""
    values: tuple = ()

    def as_list(self) -> list[str]:
        return list(self.values)


Submission = Union[SingleAnswer, MultipleAnswers]

EMPTY_SUBMISSION = MultipleAnswers()


def _to_text(value: Any) -> str:
    """Render one list item the way the browser client stringifies it."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ','.join(_to_text(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


def parse_submission(raw: Any) -> Submission:
    """
    Parse one raw submitted value.

    Strings become a ``SingleAnswer``; lists and tuples become
    ``MultipleAnswers`` with every element coerced to a string. Anything
    else (missing values, numbers, objects) is an empty submission.
    """
    if isinstance(raw, (SingleAnswer, MultipleAnswers)):
        return raw
    if isinstance(raw, str):
        return SingleAnswer(raw)
    if isinstance(raw, (list, tuple)):
        return MultipleAnswers(tuple(_to_text(item) for item in raw))
    return EMPTY_SUBMISSION


def parse_answers(raw: Any) -> dict[str, Submission]:
    """Parse a ``{questionId: value}`` mapping; a non-mapping yields no answers."""
    if not isinstance(raw, Mapping):
        return {}
    return {str(key): parse_submission(value) for key, value in raw.items()}


def is_correct(question_type: str, submitted: Iterable[str], correct: Iterable[str]) -> bool:
    """Compare trimmed submitted values with trimmed correct values for a question type."""
    submitted = [value.strip() for value in submitted]
    correct = [value.strip() for value in correct]

    if question_type == CHECKBOX:
        return set(submitted) == set(correct)

    first_submitted = submitted[0] if submitted else ''
    first_correct = correct[0] if correct else ''
    return first_submitted == first_correct


@dataclass
class GradeReport:
    total: int
    correct_count: int
    percent: float
    records: list = field(default_factory=list)

    def serialized_records(self) -> list[str]:
        """One JSON blob per question, as stored on a result."""
        return [json.dumps(record) for record in self.records]


def grade(questions: Iterable, answers: Mapping) -> GradeReport:
    """
    Grade submitted answers against a quiz's questions.

    Args:
        questions: Ordered questions, each with ``id``, ``question_type``
            and ``correct_answers`` attributes.
        answers: Mapping of question id to a ``Submission`` or a raw value.
            Keys that match no question are ignored.

    Returns:
        GradeReport with the question count, the number answered correctly,
        the unrounded percentage and one ``{questionId, submitted}`` record
        per question.
    """
    questions = list(questions)
    if not isinstance(answers, Mapping):
        answers = {}

    correct_count = 0
    records = []
    for question in questions:
        submission = parse_submission(answers.get(question.id))
        submitted = submission.as_list()
        correct = parse_submission(question.correct_answers).as_list()

        if is_correct(question.question_type, submitted, correct):
            correct_count += 1

        records.append({'questionId': question.id, 'submitted': submitted})

    total = len(questions)
    percent = 0.0 if total == 0 else (correct_count / total) * 100
    return GradeReport(total=total, correct_count=correct_count, percent=percent, records=records)
