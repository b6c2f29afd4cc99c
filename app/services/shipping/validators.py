"""
Endpoint Validators
===================

Satu fungsi validasi per endpoint. Masing-masing mengembalikan ValidationResult
dan boleh membaca repository untuk cek unique/exists, tapi tidak pernah menulis.
"""

from decimal import Decimal
from typing import Any, Dict, Mapping

from pydantic import TypeAdapter

from ...schemas import (
    ShippingMethodCreateSchema, ShippingMethodUpdateSchema, ShippingMethodListQuerySchema,
    ShippingZoneCreateSchema, PaginationQuerySchema, ShippingFeeCalculateSchema,
    ValidationResult, validate_schema
)

MIN_STRICT_WEIGHT = Decimal('0.1')

PAGINATION_MESSAGES = {
    'page.integer': 'The page must be an integer.',
    'page.min': 'The page must be at least 1.',
    'page.max': 'The page is too large.',
    'per_page.integer': 'The per page value must be an integer.',
    'per_page.min': 'The per page value must be at least 1.',
    'per_page.max': 'The per page value may not be greater than 100.',
}

METHOD_LIST_MESSAGES = {
    **PAGINATION_MESSAGES,
    'name.string': 'The name filter must be a string.',
    'name.max': 'The name filter may not be greater than 255 characters.',
    'estimated_days.integer': 'The estimated days filter must be an integer.',
    'estimated_days.min': 'The estimated days filter must be at least 1.',
    'estimated_days.max': 'The estimated days filter is too large.',
    'sort_by.in': 'The sort field must be one of: base_cost, estimated_days.',
    'sort_order.in': 'The sort order must be either asc or desc.',
}

METHOD_MESSAGES = {
    'name.required': 'The shipping method name is required.',
    'name.string': 'The shipping method name must be a string.',
    'name.max': 'The shipping method name may not be greater than 255 characters.',
    'name.unique': 'The shipping method name has already been taken.',
    'description.string': 'The description must be a string.',
    'description.max': 'The description may not be greater than 255 characters.',
    'base_cost.required': 'The base cost is required.',
    'base_cost.numeric': 'The base cost must be a number.',
    'base_cost.min': 'The base cost must not be negative.',
    'base_cost.decimal': 'The base cost may have at most 8 digits and 2 decimal places.',
    'cost_per_kg.required': 'The cost per kg is required.',
    'cost_per_kg.numeric': 'The cost per kg must be a number.',
    'cost_per_kg.min': 'The cost per kg must not be negative.',
    'cost_per_kg.decimal': 'The cost per kg may have at most 8 digits and 2 decimal places.',
    'estimated_days.required': 'The estimated days is required.',
    'estimated_days.integer': 'The estimated days must be an integer.',
    'estimated_days.min': 'The estimated days must be at least 1.',
    'estimated_days.max': 'The estimated days is too large.',
}

ZONE_MESSAGES = {
    'zone_name.required': 'The zone name is required.',
    'zone_name.string': 'The zone name must be a string.',
    'zone_name.max': 'The zone name may not be greater than 255 characters.',
    'zone_name.unique': 'The zone name has already been taken.',
    'additional_fee.required': 'The additional fee is required.',
    'additional_fee.numeric': 'The additional fee must be a number.',
    'additional_fee.min': 'The additional fee must not be negative.',
    'additional_fee.decimal': 'The additional fee may have at most 8 digits and 2 decimal places.',
}

FEE_MESSAGES = {
    'shipping_method_id.required': 'The shipping method is required.',
    'shipping_method_id.integer': 'The shipping method id must be an integer.',
    'shipping_method_id.min': 'The selected shipping method is invalid.',
    'shipping_method_id.exists': 'The selected shipping method is invalid.',
    'weight.required': 'The weight is required.',
    'weight.numeric': 'The weight must be a number.',
    'weight.min': 'The weight must not be negative.',
    'weight.decimal': 'The weight may have at most 6 whole digits and 2 decimal places.',
    'weight.strict_min': 'The weight must be at least 0.1 kg.',
    'destination.required': 'The destination is required.',
    'destination.string': 'The destination must be a string.',
    'destination.max': 'The destination may not be greater than 255 characters.',
    'destination.exists': 'The selected destination is invalid.',
}

def _clean_query(params: Mapping[str, Any]) -> Dict[str, Any]:
    # Query string kosong (?name=) dianggap tidak dikirim
    return {key: value for key, value in params.items() if value not in (None, '')}

def _stripped(data: Any, field: str):
    value = data.get(field) if isinstance(data, dict) else None
    return value.strip() if isinstance(value, str) and value.strip() else None

def validate_pagination_query(params: Mapping[str, Any]) -> ValidationResult:
    return validate_schema(PaginationQuerySchema, _clean_query(params), PAGINATION_MESSAGES)

def validate_method_list_query(params: Mapping[str, Any]) -> ValidationResult:
    return validate_schema(ShippingMethodListQuerySchema, _clean_query(params), METHOD_LIST_MESSAGES)

async def validate_method_create(data: Any, methods) -> ValidationResult:
    result = validate_schema(ShippingMethodCreateSchema, data, METHOD_MESSAGES)

    name = _stripped(data, 'name')
    if name and not result.has_error('name'):
        if await methods.get_by_name(name) is not None:
            result.add_error('name', METHOD_MESSAGES['name.unique'])
    return result

def validate_method_update(data: Any) -> ValidationResult:
    return validate_schema(ShippingMethodUpdateSchema, data, METHOD_MESSAGES)

async def validate_zone_create(data: Any, zones) -> ValidationResult:
    result = validate_schema(ShippingZoneCreateSchema, data, ZONE_MESSAGES)

    zone_name = _stripped(data, 'zone_name')
    if zone_name and not result.has_error('zone_name'):
        if await zones.get_by_name(zone_name) is not None:
            result.add_error('zone_name', ZONE_MESSAGES['zone_name.unique'])
    return result

async def validate_fee_calculation(data: Any, methods, zones, strict: bool = False) -> ValidationResult:
    """
    Validasi request kalkulasi ongkir.

    shipping_method_id harus merujuk metode yang ada. Dalam strict mode,
    weight minimal 0.1 dan destination harus nama zona yang terdaftar;
    di luar strict mode zona yang tidak dikenal tetap diterima.
    """
    result = validate_schema(ShippingFeeCalculateSchema, data, FEE_MESSAGES)
    if not isinstance(data, dict):
        return result

    if 'shipping_method_id' in data and not result.has_error('shipping_method_id'):
        method_id = TypeAdapter(int).validate_python(data['shipping_method_id'])
        if await methods.get(method_id) is None:
            result.add_error('shipping_method_id', FEE_MESSAGES['shipping_method_id.exists'])

    if strict:
        if result.data is not None and result.data.weight < MIN_STRICT_WEIGHT:
            result.add_error('weight', FEE_MESSAGES['weight.strict_min'])

        destination = _stripped(data, 'destination')
        if destination and not result.has_error('destination'):
            if await zones.get_by_name(destination) is None:
                result.add_error('destination', FEE_MESSAGES['destination.exists'])
    return result
