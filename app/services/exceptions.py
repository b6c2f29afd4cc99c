"""
Custom Exceptions untuk Shipping Services
=========================================

Definisi semua custom exceptions yang digunakan dalam business logic
"""

from typing import Dict, List, Optional

class ShippingServiceError(Exception):
    """Base exception untuk semua shipping service errors"""
    def __init__(self, message, error_code=None, details=None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

class ValidationError(ShippingServiceError):
    """Error untuk validation failures, membawa pesan per field"""
    def __init__(self, errors: Dict[str, List[str]], message: str = "Invalid input data"):
        super().__init__(message, 'VALIDATION_ERROR', {'errors': errors})
        self.errors = errors

class NotFoundError(ShippingServiceError):
    """Error ketika resource tidak ditemukan"""
    def __init__(self, resource_type, resource_id, message: Optional[str] = None, details=None):
        message = message or f"{resource_type} with ID {resource_id} not found"
        super().__init__(message, 'NOT_FOUND', details)
        self.resource_type = resource_type
        self.resource_id = resource_id

class ConflictError(ShippingServiceError):
    """Error untuk resource conflicts"""
    def __init__(self, message, resource_type=None, details=None):
        super().__init__(message, 'CONFLICT_ERROR', details)
        self.resource_type = resource_type

class DuplicateEntryError(ShippingServiceError):
    """Error dari repository ketika unique constraint dilanggar"""
    def __init__(self, resource_type, field, value, details=None):
        message = f"{resource_type} with {field} '{value}' already exists"
        super().__init__(message, 'DUPLICATE_ENTRY', details)
        self.resource_type = resource_type
        self.field = field
        self.value = value
