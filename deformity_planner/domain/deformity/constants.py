# 기준 중립 기계축 각도 (도)
NEUTRAL_ANGLE = 87.0

# |EAD| 가 이 값 미만이면 관절외 변형은 무시 가능
NEGLIGIBLE_EAD = 0.1

# IAD% / EAD% 판단 경계 (퍼센트, 경계 포함 여부는 룰에서 결정)
SHARE_LIMIT_PCT = 60.0

# 단일 부위 절골술로 보는 TD% / FD% 하한
SINGLE_SITE_PCT = 80.0

# 데모 프리셋 (MPTA, LDFA, JLCA)
DEMO_PRESET = {"mpta": 84.0, "ldfa": 90.0, "jlca": 4.0}
