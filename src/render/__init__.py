"""
Render layer: HTMX용 HTML 조각 생성.

역할:
- 엔티티 목록/단일 항목 → HTML 조각
- Jinja2 템플릿 (autoescape)
"""

from .fragments import FragmentRenderer

__all__ = [
    "FragmentRenderer",
]
