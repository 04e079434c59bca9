from dataclasses import dataclass
from datetime import datetime, timezone


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass(frozen=True)
class ScoreRecord:
    name: str
    guess: str
    prompt: str
    score: int
    date: str

    @classmethod
    def create(cls, name: str, guess: str, prompt: str, score: int) -> 'ScoreRecord':
        return cls(name=name, guess=guess, prompt=prompt, score=score, date=utc_timestamp())

    @classmethod
    def from_dict(cls, data: dict) -> 'ScoreRecord':
        return cls(
            name=data['name'],
            guess=data['guess'],
            prompt=data['prompt'],
            score=int(data['score']),
            date=data['date'],
        )

    def to_dict(self):
        return {
            'name': self.name,
            'guess': self.guess,
            'prompt': self.prompt,
            'score': self.score,
            'date': self.date,
        }


@dataclass(frozen=True)
class PlayerScore:
    """One player's result in group play."""
    name: str
    guess: str
    score: int

    def to_dict(self):
        return {
            'name': self.name,
            'guess': self.guess,
            'score': self.score,
        }


@dataclass(frozen=True)
class Round:
    """The target prompt and image guesses are scored against."""
    prompt: str
    image: str
