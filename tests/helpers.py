import pendulum

from memote.time import datetime_to_ms


class FakeClock:
    """Epoch-millisecond clock that advances by ``step`` on every read."""

    def __init__(self, start: int, step: int = 1000) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> int:
        value = self.current
        self.current += self.step
        return value


def local_ms(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    return datetime_to_ms(
        pendulum.datetime(
            year,
            month,
            day,
            hour,
            minute,
            second,
            millisecond * 1000,
            tz="local",
        )
    )


def sequential_ids(prefix: str = "note"):
    counter = 0

    def generate() -> str:
        nonlocal counter
        counter += 1
        return f"{prefix}-{counter}"

    return generate
