from dataclasses import dataclass

from hashpass.generator import SYMBOLS


@dataclass(frozen=True)
class StrengthResult:
    score: int
    label: str

    def __str__(self) -> str:
        return f"{self.label} (Score: {self.score}/100)"


def classify_score(score: int) -> str:
    """Return a human-readable strength label for a 0-100 score."""
    if score >= 80:
        return "Very Strong"
    elif score >= 60:
        return "Strong"
    elif score >= 40:
        return "Medium"
    else:
        return "Weak"


def score_password(password: str) -> StrengthResult:
    """
    Score a password with a fixed rule table.

    - Length: >= 12 gives 25, >= 8 gives 15, otherwise 5.
    - One uppercase, lowercase or digit character: 15 each.
    - One symbol from the generator's symbol group: 20.
    - More distinct characters than 80% of the length: 10.
    """
    score = 0

    if len(password) >= 12:
        score += 25
    elif len(password) >= 8:
        score += 15
    else:
        score += 5

    if any("A" <= c <= "Z" for c in password):
        score += 15
    if any("a" <= c <= "z" for c in password):
        score += 15
    if any("0" <= c <= "9" for c in password):
        score += 15
    if any(c in SYMBOLS for c in password):
        score += 20

    if len(set(password)) > len(password) * 0.8:
        score += 10

    score = min(max(score, 0), 100)
    return StrengthResult(score=score, label=classify_score(score))
