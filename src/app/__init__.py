"""
App layer: HTTP 서버 (FastAPI + HTMX).

역할:
- 조각 라우트 (HTML) / API 라우트 (JSON)
- 입력 검증, CRUD 서비스
- ⚠️ 저장 로직 없음 (core에 위임)

주의: 폴더 구분
- src/render/templates/ → Jinja2 HTML 조각 (HTMX)
- default.yaml (루트) → 설정
"""
