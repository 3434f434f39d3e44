from flask import Blueprint, Response, jsonify, request
from flask_login import login_required

from atividades.errors import ValidationError
from atividades.services.auth_service import get_user
from atividades.services.guard import current_user_id
from atividades.services.progress_service import build_progress
from atividades.services.report_service import build_month_report, export_activities_csv
from atividades.services.validation import validate_year_month

reports_bp = Blueprint('reports', __name__, url_prefix='/api')


@reports_bp.route('/progress/<int:year>/<int:month>', methods=['GET'])
@login_required
def progress(year: int, month: int):
    user_id = current_user_id()
    validate_year_month(year, month)
    return jsonify(build_progress(get_user(user_id), year, month))


@reports_bp.route('/reports/<int:year>/<int:month>', methods=['GET'])
@login_required
def month_report(year: int, month: int):
    user_id = current_user_id()
    validate_year_month(year, month)
    return jsonify(build_month_report(user_id, year, month))


@reports_bp.route('/reports/export.csv', methods=['GET'])
@login_required
def export_csv():
    user_id = current_user_id()
    year = request.args.get('year', type=int)
    month = request.args.get('month', type=int)

    if (year is None) != (month is None):
        raise ValidationError(
            {'month': 'Informe ano e mês juntos.'},
            message='Informe ano e mês juntos.',
        )
    if year is not None:
        validate_year_month(year, month)
        filename = f'atividades-{year}-{month + 1:02d}.csv'
    else:
        filename = 'atividades.csv'

    csv_text = export_activities_csv(user_id, year, month)
    return Response(
        csv_text,
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename={filename}'},
    )
