import asyncio

from fuelsync.retry import get_height_with_retry


class FlakyHeight:
    def __init__(self, failures: int, height: int):
        self.failures = failures
        self.height = height
        self.calls = 0

    async def __call__(self) -> int:
        self.calls += 1
        if self.calls <= self.failures:
            raise ConnectionError(f'attempt {self.calls} failed')
        return self.height


class RecordingSleep:
    def __init__(self):
        self.durations = []

    async def __call__(self, secs: float) -> None:
        self.durations.append(secs)


def test_returns_immediately_on_success():
    get_height = FlakyHeight(0, 7)
    sleep = RecordingSleep()
    assert asyncio.run(get_height_with_retry(get_height, sleep)) == 7
    assert get_height.calls == 1
    assert sleep.durations == []


def test_backoff_grows_by_one():
    get_height = FlakyHeight(3, 1000)
    sleep = RecordingSleep()
    assert asyncio.run(get_height_with_retry(get_height, sleep)) == 1000
    assert get_height.calls == 4
    assert sleep.durations == [1, 2, 3]


def test_backoff_is_capped():
    get_height = FlakyHeight(8, 1)
    sleep = RecordingSleep()
    assert asyncio.run(get_height_with_retry(get_height, sleep)) == 1
    assert sleep.durations == [1, 2, 3, 4, 5, 5, 5, 5]
