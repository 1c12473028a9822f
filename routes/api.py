from flask import request, jsonify, current_app
from . import api_bp
from services import habit_service


def json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@api_bp.route('/habits', methods=['GET'])
def list_habits():
    habits = habit_service.list_habits()
    return jsonify([h.model_dump(mode='json') for h in habits])


@api_bp.route('/habits', methods=['POST'])
def create_habit():
    data = json_body()
    current_app.logger.debug('Received request to add habit: %s', data)
    habit = habit_service.create_habit(data.get('name'), data.get('frequency'), data.get('goal'))
    return jsonify(habit.model_dump(mode='json')), 201


@api_bp.route('/habits/summary', methods=['GET'])
def habits_summary():
    return jsonify(habit_service.summary().model_dump(mode='json'))


@api_bp.route('/habits/<int:habit_id>', methods=['GET'])
def get_habit(habit_id):
    return jsonify(habit_service.get_habit(habit_id).model_dump(mode='json'))


@api_bp.route('/habits/<int:habit_id>', methods=['DELETE'])
def delete_habit(habit_id):
    habit_service.delete_habit(habit_id)
    return '', 204


@api_bp.route('/habits/<int:habit_id>/log', methods=['PUT'])
def log_habit(habit_id):
    data = json_body()
    result = habit_service.log_habit(
        habit_id,
        data.get('completed', False),
        data.get('notes'),
        data.get('date'),
    )
    if result['created']:
        return jsonify({'message': 'Habit logged successfully'}), 201
    return jsonify({'message': 'Habit log updated successfully'})


@api_bp.route('/habits/<int:habit_id>/history', methods=['GET'])
def habit_history(habit_id):
    days = request.args.get('days', current_app.config['HISTORY_DAYS'])
    strip = habit_service.habit_history(habit_id, days)
    return jsonify([d.model_dump(mode='json') for d in strip])
