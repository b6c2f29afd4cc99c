"""
Custom Validators
=================

Validasi payload berbasis schema yang menghasilkan hasil terstruktur
(ok | error per field) alih-alih melempar exception.
"""

from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError as PydanticValidationError

# Tipe error Pydantic -> nama rule, dipakai sebagai key pesan "field.rule"
ERROR_RULES = {
    'missing': 'required',
    'string_too_short': 'required',
    'string_type': 'string',
    'int_type': 'integer',
    'int_parsing': 'integer',
    'int_from_float': 'integer',
    'decimal_type': 'numeric',
    'decimal_parsing': 'numeric',
    'decimal_not_finite': 'numeric',
    'finite_number': 'numeric',
    'greater_than': 'min',
    'greater_than_equal': 'min',
    'less_than': 'max',
    'less_than_equal': 'max',
    'string_too_long': 'max',
    'decimal_max_digits': 'decimal',
    'decimal_max_places': 'decimal',
    'decimal_whole_digits': 'decimal',
    'literal_error': 'in',
}

class ValidationResult:
    """Hasil validasi: data tervalidasi atau mapping field -> daftar pesan."""

    def __init__(self, data: Optional[BaseModel] = None, errors: Optional[Dict[str, List[str]]] = None):
        self.data = data
        self.errors: Dict[str, List[str]] = errors or {}

    @property
    def ok(self) -> bool:
        return not self.errors and self.data is not None

    def add_error(self, field: str, message: str) -> None:
        messages = self.errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)

    def has_error(self, field: str) -> bool:
        return field in self.errors

    def __repr__(self):
        return f'<ValidationResult ok={self.ok} errors={self.errors}>'

def error_rule(error_type: str) -> str:
    return ERROR_RULES.get(error_type, error_type)

def error_field(loc) -> str:
    return '.'.join(str(part) for part in loc) or 'body'

def validate_schema(schema_class: Type[BaseModel], data: Any,
                    messages: Optional[Dict[str, str]] = None) -> ValidationResult:
    """
    Jalankan schema terhadap data mentah.

    Pesan dicari di `messages` dengan key "field.rule"; kalau tidak ada,
    pakai pesan bawaan Pydantic.
    """
    messages = messages or {}
    result = ValidationResult()

    if not isinstance(data, dict):
        result.add_error('body', 'The request body must be a JSON object.')
        return result

    try:
        result.data = schema_class.model_validate(data)
    except PydanticValidationError as exc:
        for error in exc.errors():
            field = error_field(error['loc'])
            rule = error_rule(error['type'])
            result.add_error(field, messages.get(f'{field}.{rule}', error['msg']))
    return result
