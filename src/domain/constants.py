"""
Domain Constants: 전역 상수.

검증 범위, 시드 데이터, HTMX 대상 element id 등.
"""

# =============================================================================
# Validation Bounds (검증 범위)
# =============================================================================

USER_AGE_MIN = 0
USER_AGE_MAX = 130

# =============================================================================
# Seed Data (시드 데이터)
# =============================================================================
# store.seed=true 일 때 각 저장소에 미리 채워지는 항목 (id 1..3 사용)

SEED_MESSAGES = [
    "I am working on the topic HTMX",
    "This is for my Projektarbeit 2 in Informatik Master",
    "I will have to show how HTMX works with a Python Backend",
]

SEED_TASKS = [
    ("Explore HTMX basics", True),
    ("Integrate HTMX with FastAPI backend", False),
    ("Extend demo with a Task Board", False),
]

SEED_USERS = [
    ("Ada", "Lovelace", 36, "FEMALE"),
    ("Alan", "Turing", 41, "MALE"),
    ("Grace", "Hopper", 85, "FEMALE"),
]

# =============================================================================
# HTMX Targets (프론트엔드가 교체하는 영역)
# =============================================================================

TASK_LIST_ID = "task-list"
USER_LIST_ID = "user-list"

# =============================================================================
# Empty State Texts (빈 목록 안내)
# =============================================================================

EMPTY_MESSAGES_TEXT = "Keine Nachrichten"
EMPTY_TASKS_TEXT = "No tasks yet. Add a task to get started."
EMPTY_USERS_TEXT = "No users yet. Use the form above to create a user."
EMPTY_SEARCH_TEXT = "No users match your search."
