"""
Validation and normalization of authored quiz payloads.

The same rules run on create and on replace, so every stored question
satisfies the invariants the grader relies on:
- BOOLEAN: exactly one correct value, "true" or "false" (default "true")
- INPUT: exactly one correct value, possibly the empty string
- CHECKBOX: correct values are a subset of the options
"""
from typing import Any

from quizbuilder.errors import ValidationError
from quizbuilder.quiz.models import BOOLEAN, INPUT, CHECKBOX, QUESTION_TYPES, TITLE_MAX_LENGTH

BOOLEAN_VALUES = ('true', 'false')


def _as_string_list(value: Any) -> list[str]:
    """Accept a list of strings, or a bare string as a one-element list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [item if isinstance(item, str) else str(item) for item in value if item is not None]
    raise ValidationError('options and correct must be lists of strings')


def _normalize_boolean(correct: list) -> list[str]:
    value = correct[0] if correct else None
    if isinstance(value, bool):
        value = 'true' if value else 'false'
    if not value:
        return ['true']
    if value not in BOOLEAN_VALUES:
        raise ValidationError('BOOLEAN questions accept only "true" or "false" as the correct answer')
    return [value]


def normalize_question(payload: Any, position: int) -> dict:
    """
    Validate one authored question and apply the per-type rules.

    Args:
        payload: The question object from the request body.
        position: 1-based index of the question, used in error messages.

    Returns:
        Dict with ``question_type``, ``question_text``, ``options`` and
        ``correct_answers`` ready to build a Question.
    """
    if not isinstance(payload, dict):
        raise ValidationError(f'Question {position} must be an object')

    question_type = payload.get('type')
    if question_type not in QUESTION_TYPES:
        raise ValidationError(
            f'Question {position} has an invalid type. Must be one of: {", ".join(QUESTION_TYPES)}'
        )

    text = payload.get('text')
    if not isinstance(text, str) or not text.strip():
        raise ValidationError(f'Question {position} text is required')

    raw_correct = payload.get('correct')
    if question_type == BOOLEAN:
        # Python booleans are mapped before list coercion stringifies them
        if isinstance(raw_correct, bool):
            raw_correct = [raw_correct]
        elif isinstance(raw_correct, (list, tuple)) and raw_correct and isinstance(raw_correct[0], bool):
            raw_correct = [raw_correct[0]]
        else:
            raw_correct = _as_string_list(raw_correct)
        options = []
        correct = _normalize_boolean(raw_correct)
    elif question_type == INPUT:
        raw_correct = _as_string_list(raw_correct)
        options = []
        correct = [raw_correct[0] if raw_correct else '']
    else:
        options = _as_string_list(payload.get('options'))
        correct = []
        for value in _as_string_list(raw_correct):
            if value in options and value not in correct:
                correct.append(value)

    return {
        'question_type': question_type,
        'question_text': text,
        'options': options,
        'correct_answers': correct,
    }


def normalize_quiz_payload(data: Any) -> dict:
    """
    Validate a create/replace request body.

    Returns:
        Dict with the trimmed ``title`` and the normalized ``questions`` in
        submitted order.

    Raises:
        ValidationError: If the title is missing, blank or too long, ``questions`` is
            not a list, or any question is malformed.
    """
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')

    title = data.get('title')
    questions = data.get('questions')
    if not isinstance(title, str) or not title.strip() or not isinstance(questions, list):
        raise ValidationError('Title and questions array are required')
    if len(title.strip()) > TITLE_MAX_LENGTH:
        raise ValidationError(f'Title must be at most {TITLE_MAX_LENGTH} characters')

    return {
        'title': title.strip(),
        'questions': [normalize_question(question, index) for index, question in enumerate(questions, start=1)],
    }
