"""Counting sentences in a text, sequentially and split among workers."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

DEFAULT_WORKERS = 4
TERMINATORS = frozenset(".!?")

_SAMPLE_SENTENCES = (
    "Parallel computing splits one large task into many smaller ones.",
    "Each worker receives a share of the data and processes it on its own.",
    "When every worker is done, the partial results are combined.",
    "This final step is usually called a reduction.",
    "A reduction can take a sum, a minimum or a maximum.",
    "Some problems divide evenly among the workers.",
    "Others leave a remainder that someone has to handle.",
    "Often the first worker takes the leftover elements.",
    "Sometimes the last worker takes them instead.",
    "Either choice gives the same answer if the code is correct.",
    "Does the order of the partial results matter?",
    "For integer sums and minima it does not.",
    "For floating-point sums it can change the last few digits.",
    "That is why tests compare such results with a small tolerance.",
    "A value like 3.14 keeps its point inside the number.",
    "Counting sentences is a classic exercise in text processing.",
    "A sentence ends with a full stop, a question mark or an exclamation mark!",
    "The mark must be followed by a space or by the end of the text.",
    "Names written as J.Smith do not end a sentence.",
    "Splitting the text at arbitrary points is safe because each check "
    "looks one character ahead.",
    "Finding the smallest element of a matrix is another common task.",
    "The matrix is flattened into one long row of numbers.",
    "Each worker scans its own slice of that row.",
    "The smallest of the local minima is the global minimum.",
    "Row minima are found in much the same way.",
    "Here each worker receives whole rows rather than single numbers.",
    "Column sums reverse the picture and hand out whole columns.",
    "Sign alternations count how often neighbouring numbers change sign.",
    "Neighbouring slices must overlap by one element to catch every change.",
    "Without that overlap a change at a border would be lost.",
    "The trapezoidal rule approximates the area under a curve.",
    "It replaces the curve with many thin trapezoids.",
    "Each trapezoid has an area that is easy to compute.",
    "Workers take every n-th trapezoid in turn.",
    "The areas are then added together.",
    "More trapezoids give a more accurate result.",
    "Unique characters can also be counted in parallel.",
    "A character is unique if it appears in one string but not in the other.",
    "Each distinct character is counted only once.",
    "The longer string gets more workers than the shorter one.",
    "Random inputs help to check that both versions agree.",
    "Fixed inputs pin down the exact expected values.",
    "Large inputs show whether the work is really shared out.",
    "Tiny inputs reveal mistakes in the handling of remainders.",
    "What happens when there are more workers than elements?",
    "Some workers simply receive nothing to do.",
    "Others refuse to start and report an error.",
    "Both behaviours are valid as long as they are documented.",
    "Good tests cover all of these cases.",
    "That is the end of this sample text.",
)


def _ends_sentence(text: str, index: int) -> bool:
    """A terminator followed by a space, a NUL or the end of the text."""
    if text[index] not in TERMINATORS:
        return False
    following = text[index + 1] if index + 1 < len(text) else "\0"
    return following in (" ", "\0")


def _ends_sentence_tail(text: str, index: int) -> bool:
    """A terminator that is the last character or is followed by a space."""
    if text[index] not in TERMINATORS:
        return False
    return index == len(text) - 1 or text[index + 1] == " "


def sequential_count(text: str) -> int:
    """Count sentence endings: '.', '!' or '?' followed by a space or the end."""
    return sum(1 for index in range(len(text)) if _ends_sentence(text, index))


def parallel_count(text: str, workers: int = DEFAULT_WORKERS) -> int:
    """Count sentence endings, splitting the text among workers.

    With one worker the whole text is scanned at once. Otherwise every worker
    but the first scans an equal slice of ``len(text) // (workers - 1)``
    characters and the first scans the characters left over at the end.
    More workers than characters is an error.
    """
    if workers < 1:
        raise ValueError("at least one worker is required")
    length = len(text)
    if workers > length:
        raise ValueError("more workers than characters in the text")

    if workers == 1:
        separation, remaining = length, 0
        tail_start = 0
    else:
        separation, remaining = divmod(length, workers - 1)
        tail_start = length - remaining

    def work(rank: int) -> int:
        if rank == 0:
            return sum(
                1
                for index in range(tail_start, length)
                if _ends_sentence_tail(text, index)
            )
        start = separation * (rank - 1)
        return sum(
            1
            for index in range(start, separation * rank)
            if _ends_sentence(text, index)
        )

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return sum(pool.map(work, range(workers)))


def sample_text() -> str:
    """Return the built-in sample text of fifty sentences."""
    return " ".join(_SAMPLE_SENTENCES)