import math


class Scorer:
    """Strategy interface for scoring a guess against the round prompt."""

    def score(self, guess: str, target: str) -> int:
        raise NotImplementedError


class WordOverlapScorer(Scorer):
    """Percentage of the target's vocabulary covered by the guess.

    Both texts are lower-cased and split on whitespace. Every guess word found
    in the target counts once per occurrence in the guess and the total is
    divided by the number of distinct target words, so "red apple" against
    "a red apple on a table" scores 2/5 = 40. Repetitive guesses can push the
    ratio past 100; the result is clamped to [0, 100]. A target without words
    scores 0.
    """

    def score(self, guess: str, target: str) -> int:
        target_words = set(target.lower().split())
        if not target_words:
            return 0
        matches = sum(1 for word in guess.lower().split() if word in target_words)
        # round half up, 12.5 -> 13
        percent = math.floor(100 * matches / len(target_words) + 0.5)
        return max(0, min(100, percent))


_default_scorer = WordOverlapScorer()


def similarity_score(guess: str, target: str) -> int:
    return _default_scorer.score(guess, target)
