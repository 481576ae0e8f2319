"""
Errors — Исключения BigInteger engine

Только два вида ошибок сигнализируются наружу:
- InvalidFormat: текст не является десятичным целым
- DivisionByZero: делитель с нулевой магнитудой

Нарушения контракта вызывающей стороны (отрицательный аргумент sqrt,
перепутанные операнды magnitude_subtract и т.п.) — обычный ValueError.
"""


class BigIntegerError(Exception):
    """Базовое исключение для всех ошибок BigInteger engine."""

    pass


class InvalidFormat(BigIntegerError, ValueError):
    """
    Текст не является корректной записью десятичного целого.

    Допустимый формат: необязательный '-' и одна или более ASCII цифр.
    Не восстанавливается внутри engine — пробрасывается вызывающему коду.
    """

    pass


class DivisionByZero(BigIntegerError, ZeroDivisionError):
    """
    Делитель имеет нулевую магнитуду.

    Фатально для данного вызова: нет retry, нет частичного результата,
    нет подстановки нуля.
    """

    pass
