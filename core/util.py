import math
from datetime import date
from decimal import Decimal


def current_season():
    today = date.today()
    return today.year


def round_half_up(n, decimals=0):
    multiplier = 10 ** decimals
    return math.floor(Decimal(n) * multiplier + Decimal("0.5")) / multiplier


def to_decimal(value):
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
