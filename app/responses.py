"""
API Response Models
===================

Standardized API response envelope:
{status, message, data?, errors?, pagination?}
"""

import math

class APIResponse:
    """Standard API response format"""

    @staticmethod
    def success(data=None, message="Success"):
        response = {
            "status": True,
            "message": message
        }
        if data is not None:
            response["data"] = data
        return response

    @staticmethod
    def error(message="Error", errors=None):
        response = {
            "status": False,
            "message": message
        }
        if errors:
            response["errors"] = errors
        return response

    @staticmethod
    def paginated(data, total, page, per_page, message="Success"):
        return {
            "status": True,
            "message": message,
            "data": data,
            "pagination": {
                "current_page": page,
                "last_page": max(1, math.ceil(total / per_page)),
                "per_page": per_page,
                "total": total
            }
        }
