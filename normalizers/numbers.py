"""숫자 필드 검증 (가격 소수점, 출판 연도)"""

import math

MIN_YEAR = 1000
MAX_YEAR = 9999

MAX_PRICE = 1_000_000

# 부동소수점 표현 오차 허용치
DECIMAL_EPSILON = 1e-9


def has_max_2_decimals(value: float) -> bool:
    """
    소수점 이하 2자리 이하인지 확인

    100배 후 가장 가까운 정수와의 차이가 epsilon 미만이면 통과.
    10.23 같은 값의 이진 표현 오차는 허용하고 10.234는 거부한다.
    NaN/Infinity는 항상 False.
    """
    if math.isnan(value) or math.isinf(value):
        return False
    scaled = value * 100
    return abs(scaled - round(scaled)) < DECIMAL_EPSILON


def is_valid_four_digit_year(year: int) -> bool:
    return MIN_YEAR <= year <= MAX_YEAR


def is_number(value: object) -> bool:
    """bool을 제외한 int/float 여부"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)
