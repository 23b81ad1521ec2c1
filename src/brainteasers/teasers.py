"""
Brain teasers: small exercises to hand to the lab.
"""

from typing import Iterable, List, Optional


DEFAULT_PRIME_CANDIDATES = (2, 3, 4, 17, 25, 29, 100)


def fibonacci(n: int) -> int:
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def is_prime(number: int) -> bool:
    if number < 2:
        return False
    if number == 2:
        return True
    if number % 2 == 0:
        return False

    i = 3
    while i * i <= number:
        if number % i == 0:
            return False
        i += 2
    return True


def fibonacci_sequence(n: int = 10) -> None:
    print("Math Problem: Fibonacci Sequence")
    print(f"First {n} Fibonacci numbers:")
    print(" ".join(str(fibonacci(i)) for i in range(n)))
    print()


def prime_checker(numbers: Iterable[int] = DEFAULT_PRIME_CANDIDATES) -> None:
    print("Math Problem: Prime Number Checker")
    for num in numbers:
        print(f"{num} is {'prime' if is_prime(num) else 'not prime'}")
    print()


def divide_numbers(a: int, b: int) -> None:
    """Integer division; a zero divisor is reported, not raised."""
    print("Brain Teaser #1: Divide Numbers")
    try:
        print(f"Solution: {a // b}")
    except ZeroDivisionError as e:
        print(f"Error: {e}")


def parse_parts(text: Optional[str]) -> List[str]:
    """Split on ';'. None and empty input are rejected."""
    if text is None:
        raise TypeError("text must not be None")
    if text == "":
        raise ValueError("Input cannot be empty")
    return text.split(";")
