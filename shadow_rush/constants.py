# shadow_rush/constants.py

# ============================================================================
# 런 길이 및 타이밍 설정
# ============================================================================

GAME_DURATION = 30  # 한 판의 제한 시간 (초)
COUNTDOWN_TICK = 1.0  # 카운트다운 간격 (초)

# 타겟 이동 간격 (ms)
MOVE_INTERVAL_MS = 750  # 시작 간격
SPEED_MIN_MS = 260  # 최소 간격
SPEED_STEP = 35  # 점수 1점당 줄어드는 간격

# ============================================================================
# 콤보 설정
# ============================================================================

COMBO_TIMEOUT_MS = 1200  # 마지막 히트 이후 콤보가 풀리는 시간
MAX_COMBO = 6

# ============================================================================
# 타겟 위치 (플레이 필드 대비 %)
# ============================================================================

# 타겟이 필드 밖으로 잘리지 않도록 여백을 둡니다
TARGET_X_RANGE = (10.0, 90.0)
TARGET_Y_RANGE = (12.0, 82.0)

# ============================================================================
# 티어 정의
# ============================================================================

TIERS = [
    {"id": "ember", "label": "Ember", "min_score": 0, "tone": 380},
    {"id": "inferno", "label": "Inferno", "min_score": 20, "tone": 520},
    {"id": "doom", "label": "Doom", "min_score": 45, "tone": 680},
]

# ============================================================================
# 하이스코어 저장
# ============================================================================

HIGH_SCORES_KEY = "mordor-high-scores"
MAX_HIGH_SCORES = 5
SCORE_FILE_NAME = "high_scores.json"
SCORE_DIR_NAME = ".shadow_rush"

# ============================================================================
# 피드백 (톤, 햅틱)
# ============================================================================

TONE_STEP_HZ = 18  # 콤보 1단계당 올라가는 톤
HIT_HAPTIC = [30]
MISS_HAPTIC = [80, 50, 60]

# ============================================================================
# 결과 배지
# ============================================================================

BADGE_PERFECT = "Perfect Run"
BADGE_LOGGED = "Run Logged"
