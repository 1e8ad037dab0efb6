"""
mp_http – thin async HTTP client wrapper over httpx.

Import path convention::

    from mp_http.adapters.http import HttpClient, with_timeout
    from mp_http.kernel.errors import ErrorKind, StatusCodeNotSuccessError
    from mp_http.kernel.types import Headers
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
