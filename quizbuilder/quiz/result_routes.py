"""
Result routes for reviewing graded submissions.
"""
from flask import jsonify

from quizbuilder.quiz import quiz_bp
from quizbuilder.quiz.repository import get_repository


@quiz_bp.route('/quizzes/<quiz_id>/results', methods=['GET'])
def list_quiz_results(quiz_id):
    """
    List result summaries recorded against a quiz id, newest first.

    Results survive deletion of their quiz, so an unknown quiz id simply
    yields whatever results still reference it.
    """
    results = get_repository().list_results(quiz_id)
    return jsonify([result.to_summary() for result in results]), 200


@quiz_bp.route('/results', methods=['GET'])
def list_results():
    """List every result with its quiz title (null once the quiz is deleted)."""
    results_data = []
    for result, quiz_title in get_repository().list_results_with_titles():
        result_data = result.to_summary()
        result_data['quizTitle'] = quiz_title
        results_data.append(result_data)
    return jsonify(results_data), 200


@quiz_bp.route('/results/<result_id>', methods=['GET'])
def get_result(result_id):
    """Get one result including the submitted answers per question."""
    result = get_repository().get_result(result_id)
    return jsonify(result.to_dict()), 200
