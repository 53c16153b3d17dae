"""
Quiz routes.

- List, read, create, replace and delete quizzes
- Submit answers to a quiz for grading
"""
from flask import current_app, jsonify, request

from quizbuilder.errors import ValidationError
from quizbuilder.quiz import quiz_bp
from quizbuilder.quiz.authoring import normalize_quiz_payload
from quizbuilder.quiz.grading import grade, parse_answers
from quizbuilder.quiz.listing import filter_by_title, paginate_quizzes
from quizbuilder.quiz.repository import get_repository


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f'{name} must be an integer')


@quiz_bp.route('/quizzes', methods=['GET'])
def list_quizzes():
    """
    List all quizzes, newest first.

    Query parameters (all optional):
        search: case-insensitive title filter
        page: 1-based page number; when present only that page is returned
        per_page: page size, defaults to DEFAULT_PAGE_SIZE

    When paging, the totals are returned in the X-Total-Count,
    X-Total-Pages, X-Page and X-Per-Page headers.
    """
    summaries = [quiz.to_summary() for quiz in get_repository().list_quizzes()]
    search = request.args.get('search')

    if 'page' not in request.args:
        return jsonify(filter_by_title(summaries, search)), 200

    page = _int_arg('page', 1)
    per_page = _int_arg('per_page', current_app.config['DEFAULT_PAGE_SIZE'])
    if per_page < 1:
        raise ValidationError('per_page must be at least 1')
    per_page = min(per_page, current_app.config['MAX_PAGE_SIZE'])

    result = paginate_quizzes(summaries, search=search, page=page, per_page=per_page)
    response = jsonify(result.items)
    response.headers['X-Total-Count'] = str(result.total)
    response.headers['X-Total-Pages'] = str(result.total_pages)
    response.headers['X-Page'] = str(result.page)
    response.headers['X-Per-Page'] = str(result.per_page)
    return response, 200


@quiz_bp.route('/quizzes/<quiz_id>', methods=['GET'])
def get_quiz(quiz_id):
    """Get a quiz with its questions in order."""
    quiz = get_repository().get_quiz(quiz_id)
    return jsonify(quiz.to_dict()), 200


@quiz_bp.route('/quizzes', methods=['POST'])
def create_quiz():
    """
    Create a quiz together with its questions.

    Request body:
    {
        "title": "JavaScript Basics",
        "questions": [
            {"type": "BOOLEAN", "text": "JavaScript is compiled", "correct": ["false"]},
            {"type": "INPUT", "text": "What does DOM stand for?", "correct": ["Document Object Model"]},
            {"type": "CHECKBOX", "text": "Pick the primitives",
             "options": ["String", "Array", "Number"], "correct": ["String", "Number"]}
        ]
    }

    Questions are stored in the given order as order 1..N.
    """
    payload = normalize_quiz_payload(request.get_json(silent=True))
    quiz = get_repository().create_quiz(payload['title'], payload['questions'])

    current_app.logger.info(f"Quiz created: ID={quiz.id}, Title={quiz.title}, Questions={len(payload['questions'])}")
    return jsonify(quiz.to_dict()), 201


@quiz_bp.route('/quizzes/<quiz_id>', methods=['PUT'])
def update_quiz(quiz_id):
    """
    Replace a quiz's title and questions.

    Takes the same body as create. All existing questions are discarded and
    recreated, so question ids change and orders restart at 1.
    """
    payload = normalize_quiz_payload(request.get_json(silent=True))
    quiz = get_repository().replace_quiz(quiz_id, payload['title'], payload['questions'])

    current_app.logger.info(f"Quiz replaced: ID={quiz_id}, Questions={len(payload['questions'])}")
    return jsonify(quiz.to_dict()), 200


@quiz_bp.route('/quizzes/<quiz_id>', methods=['DELETE'])
def delete_quiz(quiz_id):
    """Delete a quiz and its questions. Results taken against it remain."""
    get_repository().delete_quiz(quiz_id)

    current_app.logger.info(f"Quiz deleted: ID={quiz_id}")
    return '', 204


@quiz_bp.route('/quizzes/<quiz_id>/submit', methods=['POST'])
def submit_quiz(quiz_id):
    """
    Grade a set of answers and record the result.

    Request body:
    {
        "answers": {
            "<boolean question id>": "false",
            "<input question id>": "Document Object Model",
            "<checkbox question id>": ["String", "Number"]
        }
    }

    Missing answers count as wrong; ids that are not part of the quiz are ignored.
    """
    repository = get_repository()
    quiz = repository.get_quiz(quiz_id)

    data = request.get_json(silent=True)
    answers = parse_answers(data.get('answers') if isinstance(data, dict) else None)

    report = grade(quiz.questions, answers)
    result = repository.add_result(quiz_id, report)

    current_app.logger.info(
        f"Quiz submitted: Quiz ID={quiz_id}, Result ID={result.id}, "
        f"Score={report.correct_count}/{report.total}"
    )
    return jsonify({
        'id': result.id,
        'quizId': quiz_id,
        'total': report.total,
        'correctCount': report.correct_count,
        'percent': report.percent,
    }), 200
