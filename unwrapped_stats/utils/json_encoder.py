"""Custom JSON encoding utilities"""
import json
from datetime import datetime
from enum import Enum

class DateTimeEncoder(json.JSONEncoder):
    """JSON encoder that handles datetime and enum values"""
    def default(self, obj):
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, Enum):
            return obj.value
        return super().default(obj)
