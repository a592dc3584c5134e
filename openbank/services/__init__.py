"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services sit between the routers and the repositories; they validate,
convert ORM entities to wire schemas, and raise the HTTP exceptions in
``openbank.utils.exceptions``.
"""
