"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services validate and derive state, call repositories, and raise the typed
HTTP errors from ``greencity.utils.exceptions``. They flush but never commit;
the router that owns the request commits.
"""
