import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from atividades.errors import InvalidCredentials, ValidationError
from atividades.models.activity import ActivityType
from atividades.models.user import UserRole

USERNAME_PATTERN = re.compile(r'[a-z]{3,20}')
EMAIL_PATTERN = re.compile(r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}')
MIN_PASSWORD_LENGTH = 6

MIN_HOURS = Decimal('0.5')
MAX_HOURS = Decimal('24')
HOURS_STEP = Decimal('0.5')


def _require_payload(payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationError({'body': 'Corpo da requisição deve ser um objeto JSON.'})
    return payload


def _clean_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ''


def _optional_text(value: Any, field: str, errors: Dict[str, str]) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        errors[field] = 'Deve ser um texto.'
        return None
    return value.strip() or None


def parse_date(value: Any) -> date:
    """Aceita ``YYYY-MM-DD`` ou um datetime ISO 8601 (so a data e mantida)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError('Data obrigatória.')

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
    except ValueError as exc:
        raise ValueError('Data inválida. Use o formato AAAA-MM-DD.') from exc


def parse_hours(value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError('As horas devem ser um número.')

    try:
        hours = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError('As horas devem ser um número.') from exc

    if not hours.is_finite():
        raise ValueError('As horas devem ser um número.')
    if hours < MIN_HOURS:
        raise ValueError('Mínimo de 0.5 horas')
    if hours > MAX_HOURS:
        raise ValueError('Máximo de 24 horas')
    if hours % HOURS_STEP != 0:
        raise ValueError('As horas devem ser múltiplas de 0.5')
    return hours


def validate_registration(payload: Any) -> Dict[str, str]:
    data = _require_payload(payload)
    errors: Dict[str, str] = {}

    username = data.get('username')
    if not isinstance(username, str) or not USERNAME_PATTERN.fullmatch(username):
        errors['username'] = (
            'O nome de usuário deve ter de 3 a 20 letras minúsculas, sem caracteres especiais.'
        )

    email = data.get('email')
    if not isinstance(email, str) or not EMAIL_PATTERN.fullmatch(email.strip()):
        errors['email'] = 'Email inválido.'

    password = data.get('password')
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        errors['password'] = 'A senha deve ter pelo menos 6 caracteres.'

    first_name = _clean_text(data.get('firstName'))
    if not first_name:
        errors['firstName'] = 'Nome é obrigatório.'

    last_name = _clean_text(data.get('lastName'))
    if not last_name:
        errors['lastName'] = 'Sobrenome é obrigatório.'

    if errors:
        raise ValidationError(errors)

    return {
        'username': username,
        'email': email.strip(),
        'password': password,
        'first_name': first_name,
        'last_name': last_name,
    }


def validate_login_payload(payload: Any) -> Dict[str, str]:
    """Credenciais ausentes contam como login recusado (401), nao como 400."""
    data = payload if isinstance(payload, dict) else {}
    identifier = _clean_text(data.get('identifier'))
    password = data.get('password')

    if not identifier or not isinstance(password, str) or not password:
        raise InvalidCredentials()

    return {'identifier': identifier, 'password': password}


def validate_profile_update(payload: Any) -> Dict[str, str]:
    data = _require_payload(payload)
    errors: Dict[str, str] = {}
    updates: Dict[str, str] = {}

    if 'firstName' in data:
        first_name = _clean_text(data.get('firstName'))
        if first_name:
            updates['first_name'] = first_name
        else:
            errors['firstName'] = 'Nome é obrigatório.'

    if 'lastName' in data:
        last_name = _clean_text(data.get('lastName'))
        if last_name:
            updates['last_name'] = last_name
        else:
            errors['lastName'] = 'Sobrenome é obrigatório.'

    if 'role' in data:
        role = data.get('role')
        if role in UserRole.values():
            updates['role'] = role
        else:
            errors['role'] = 'Papel inválido. Use: ' + ', '.join(UserRole.values()) + '.'

    if errors:
        raise ValidationError(errors)
    return updates


def validate_activity_payload(payload: Any) -> Dict[str, Any]:
    data = _require_payload(payload)
    errors: Dict[str, str] = {}
    cleaned: Dict[str, Any] = {}

    activity_type = data.get('type')
    if activity_type in ActivityType.values():
        cleaned['type'] = activity_type
    else:
        errors['type'] = 'Tipo de atividade inválido'

    try:
        cleaned['hours'] = parse_hours(data.get('hours'))
    except ValueError as exc:
        errors['hours'] = str(exc)

    try:
        cleaned['date'] = parse_date(data.get('date'))
    except ValueError as exc:
        errors['date'] = str(exc)

    cleaned['notes'] = _optional_text(data.get('notes'), 'notes', errors)

    if errors:
        raise ValidationError(errors)
    return cleaned


def validate_reminder_payload(payload: Any) -> Dict[str, Any]:
    data = _require_payload(payload)
    errors: Dict[str, str] = {}
    cleaned: Dict[str, Any] = {}

    title = _clean_text(data.get('title'))
    if title:
        cleaned['title'] = title
    else:
        errors['title'] = 'Título é obrigatório.'

    try:
        cleaned['date'] = parse_date(data.get('date'))
    except ValueError as exc:
        errors['date'] = str(exc)

    cleaned['description'] = _optional_text(data.get('description'), 'description', errors)

    if errors:
        raise ValidationError(errors)
    return cleaned


def validate_year_month(year: int, month: int) -> None:
    """``month`` e zero-based (0 = janeiro)."""
    if month < 0 or month > 11 or year < 1 or year > 9998:
        raise ValidationError({'month': 'Ano ou mês inválido'}, message='Ano ou mês inválido')
