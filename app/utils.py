import math
from typing import Optional

WORDS_PER_MINUTE = 200


def count_words(text: Optional[str]) -> int:
    if not text:
        return 0
    return len(text.split())


def calculate_reading_time(word_count: int) -> int:
    return math.ceil(word_count / WORDS_PER_MINUTE)
