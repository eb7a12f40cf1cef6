"""
Number-Theory Engine — целочисленные и криптографические примитивы

Модуль содержит:
- gcd / lcm / extended_gcd / modinv
- modexp (square-and-multiply с 128-битным аккумулятором)
- детерминированный Miller–Rabin для всего диапазона u64
- factorial, n_choose_k, phi (функция Эйлера)
- битовые утилиты: log2_floor, log10_floor, popcount, reverse_bits, rotl/rotr
- carry-less multiplication (GF(2)[x])
- constant-time сравнение байтовых последовательностей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Недопустимый вход выражается через None, а не исключение
2. Модуль 0 никогда не приводит к делению на ноль
3. extended_gcd итеративен: глубина стека не зависит от входа
4. Время работы ограничено разрядностью u64
"""

from typing import Final, Optional

from detmath.core.math.saturating import (
    U64_BITS,
    U64_MAX,
    saturating_mul_u64,
    trunc_div,
    trunc_rem,
)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Базы Miller–Rabin: детерминированный тест для всех n < 2^64
MILLER_RABIN_WITNESSES: Final[tuple[int, ...]] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

# Наибольшее n, для которого n! помещается в u64
FACTORIAL_MAX_N: Final[int] = 20


# =============================================================================
# GCD / LCM / INVERSE
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (итеративный алгоритм Евклида).

    Examples:
        >>> gcd(48, 18)
        6
        >>> gcd(7, 0)
        7
    """
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное с насыщением. 0, если любой аргумент 0.

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(0, 6)
        0
    """
    if a == 0 or b == 0:
        return 0
    return saturating_mul_u64(a // gcd(a, b), b)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """
    Расширенный алгоритм Евклида: (g, x, y) такие, что a·x + b·y = g.

    Явный цикл, воспроизводящий рекурсивную форму
        egcd(0, b) = (b, 0, 1)
        egcd(a, b) = (g, y − (b / a)·x, x), где (g, x, y) = egcd(b % a, a)
    с делением и остатком, округляющими к нулю. Частные сохраняются на
    прямом проходе и раскручиваются на обратном, глубина стека постоянна.

    Examples:
        >>> extended_gcd(3, 11)
        (1, 4, -1)
    """
    quotients: list[int] = []
    while a != 0:
        quotients.append(trunc_div(b, a))
        a, b = trunc_rem(b, a), a

    g, x, y = b, 0, 1
    for q in reversed(quotients):
        x, y = y - q * x, x
    return g, x, y


def modinv(a: int, modulus: int) -> Optional[int]:
    """
    Обратный элемент по модулю.

    Args:
        a: Элемент (i64)
        modulus: Модуль (i64)

    Returns:
        Представитель в [0, modulus) для положительного модуля;
        None, если modulus == 0 или gcd(a, modulus) != 1

    Examples:
        >>> modinv(3, 11)
        4
        >>> modinv(2, 4) is None
        True
    """
    if modulus == 0:
        return None

    g, x, _ = extended_gcd(a, modulus)
    if g != 1:
        return None

    # Отрицательный остаток корректируется прибавлением модуля
    return trunc_rem(trunc_rem(x, modulus) + modulus, modulus)


# =============================================================================
# MODEXP / PRIMALITY
# =============================================================================


def modexp(base: int, exp: int, modulus: int) -> int:
    """
    Модульное возведение в степень (square-and-multiply).

    Промежуточные произведения двух u64 укладываются в 128 бит.
    Модули 0 и 1 дают 0.

    Examples:
        >>> modexp(4, 13, 497)
        445
        >>> modexp(5, 0, 7)
        1
        >>> modexp(5, 3, 1)
        0
    """
    if modulus <= 1:
        return 0

    result = 1
    base = base % modulus
    while exp > 0:
        if exp & 1:
            result = (result * base) % modulus
        exp >>= 1
        base = (base * base) % modulus
    return result


def is_prime(n: int) -> bool:
    """
    Детерминированный тест Миллера–Рабина для u64.

    Набор баз MILLER_RABIN_WITNESSES доказанно достаточен для всех n < 2^64.

    Examples:
        >>> is_prime(97)
        True
        >>> is_prime(100)
        False
        >>> is_prime(1)
        False
    """
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    d = n - 1
    while d % 2 == 0:
        d //= 2

    for witness in MILLER_RABIN_WITNESSES:
        if n == witness:
            return True

        t = modexp(witness, d, n)
        if t == 1:
            continue

        # Последовательность a^(d·2^j), j = 0..s-1 должна встретить n - 1
        dt = d
        is_composite = True
        while dt < n - 1:
            if t == n - 1:
                is_composite = False
                break
            t = (t * t) % n
            dt = saturating_mul_u64(dt, 2)

        if is_composite:
            return False

    return True


# =============================================================================
# КОМБИНАТОРИКА / ФУНКЦИЯ ЭЙЛЕРА
# =============================================================================


def factorial(n: int) -> Optional[int]:
    """
    n! или None, если результат не помещается в u64 (n > 20).

    Examples:
        >>> factorial(5)
        120
        >>> factorial(21) is None
        True
    """
    if n > FACTORIAL_MAX_N:
        return None

    result = 1
    for i in range(2, n + 1):
        result = saturating_mul_u64(result, i)
    return result


def n_choose_k(n: int, k: int) -> int:
    """
    Биномиальный коэффициент C(n, k).

    Мультипликативная формула с симметрией k <= n - k и делением на каждом
    шаге. При насыщении промежуточного произведения результат неточен:
    это осознанный компромисс вместо рациональной арифметики.

    Examples:
        >>> n_choose_k(5, 2)
        10
        >>> n_choose_k(3, 5)
        0
    """
    if k > n:
        return 0
    if k == 0 or k == n:
        return 1
    if k > n // 2:
        k = n - k

    result = 1
    for i in range(k):
        result = saturating_mul_u64(result, n - i) // (i + 1)
    return result


def phi(n: int) -> int:
    """
    Функция Эйлера φ(n) пробным делением до √n. φ(0) = 0.

    Examples:
        >>> phi(36)
        12
        >>> phi(13)
        12
    """
    if n == 0:
        return 0

    result = n
    p = 2
    while p * p <= n:
        if n % p == 0:
            while n % p == 0:
                n //= p
            result -= result // p
        p += 1

    if n > 1:
        result -= result // n
    return result


# =============================================================================
# БИТОВЫЕ УТИЛИТЫ
# =============================================================================


def log2_floor(n: int) -> Optional[int]:
    """⌊log2 n⌋ или None для n == 0."""
    if n == 0:
        return None
    return n.bit_length() - 1


def log10_floor(n: int) -> int:
    """⌊log10 n⌋; для n == 0 возвращает 0."""
    count = 0
    while n >= 10:
        n //= 10
        count += 1
    return count


def popcount(n: int) -> int:
    return bin(n).count("1")


def reverse_bits(n: int) -> int:
    """Разворот порядка 64 бит."""
    return int(format(n, "064b")[::-1], 2)


def rotl64(n: int, k: int) -> int:
    """Циклический сдвиг влево; сдвиг берётся по модулю 64."""
    k %= U64_BITS
    return ((n << k) | (n >> (U64_BITS - k))) & U64_MAX


def rotr64(n: int, k: int) -> int:
    """Циклический сдвиг вправо; сдвиг берётся по модулю 64."""
    k %= U64_BITS
    return ((n >> k) | (n << (U64_BITS - k))) & U64_MAX


def clmul(a: int, b: int) -> int:
    """
    Carry-less умножение двух u64 (сложение заменено на XOR).

    Returns:
        128-битный результат

    Examples:
        >>> clmul(0b101, 0b110) == 0b11110
        True
    """
    result = 0
    for i in range(U64_BITS):
        if (b >> i) & 1:
            result ^= a << i
    return result


def constant_time_eq(a: bytes, b: bytes) -> bool:
    """
    Сравнение байтовых последовательностей без раннего выхода.

    Для равных длин время не зависит от позиции первого различия
    (аккумулируется OR всех XOR). Разные длины сразу дают False: длина
    обычно не секретна.
    """
    if len(a) != len(b):
        return False

    diff = 0
    for x, y in zip(a, b):
        diff |= x ^ y
    return diff == 0
