"""
In-process cache for computed payloads
The topic catalog never changes at runtime, so entries only expire by TTL
"""
import hashlib
import json
import threading
import time
from functools import wraps


class CacheManager:
    """Process-wide key/value cache with per-entry expiry"""

    _store = {}
    _lock = threading.Lock()
    default_timeout = 300

    @classmethod
    def get(cls, key):
        with cls._lock:
            entry = cls._store.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at is not None and expires_at < time.monotonic():
                del cls._store[key]
                return None
            return value

    @classmethod
    def set(cls, key, value, timeout=None):
        """Store value; timeout of 0 keeps the entry until deleted"""
        if timeout is None:
            timeout = cls.default_timeout
        expires_at = time.monotonic() + timeout if timeout else None
        with cls._lock:
            cls._store[key] = (value, expires_at)
        return True

    @classmethod
    def delete(cls, key):
        with cls._lock:
            return cls._store.pop(key, None) is not None

    @classmethod
    def clear(cls):
        with cls._lock:
            cls._store.clear()

    @staticmethod
    def generate_key(*args, **kwargs):
        """Build a stable key from positional and keyword arguments"""
        raw = json.dumps({'args': args, 'kwargs': kwargs}, sort_keys=True, default=str)
        return hashlib.sha256(raw.encode('utf-8')).hexdigest()


def cached(timeout=None, prefix=None):
    """Cache a function's return value keyed by its arguments"""
    def decorator(f):
        key_prefix = prefix or f.__name__

        @wraps(f)
        def wrapper(*args, **kwargs):
            key = f"{key_prefix}:{CacheManager.generate_key(*args, **kwargs)}"
            value = CacheManager.get(key)
            if value is not None:
                return value
            value = f(*args, **kwargs)
            if value is not None:
                CacheManager.set(key, value, timeout)
            return value
        return wrapper
    return decorator
