"""Error kinds raised by the puzzle core and mapped to responses by the views."""


class CarGuessError(Exception):
    """Base class for application errors."""


class EmptyCandidatePool(CarGuessError):
    """The catalog holds no candidates for a mode. Not retryable."""

    def __init__(self, mode: str):
        self.mode = mode
        kind = "car variants" if mode == "hard" else "car models"
        super().__init__(f"No {kind} available to create today's puzzle.")


class NotFound(CarGuessError):
    """Unknown puzzle or guess entity."""


class PreconditionFailed(CarGuessError):
    """Request does not match the puzzle's persisted mode or date."""


class PuzzleAlreadyExists(CarGuessError):
    """Insert rejected by the (date, mode) uniqueness constraint."""

    def __init__(self, date_key: str, mode: str):
        self.date_key = date_key
        self.mode = mode
        super().__init__(f"Puzzle for {date_key} ({mode}) already exists.")
