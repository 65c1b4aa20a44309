"""Tests for slot usage in twofold classes."""

import twofold as tf


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


async def _pending() -> tf.Outcome[int, str]:
    return tf.Success(1)


def test_slots() -> None:  # noqa: D103
    assert _check_slots(tf.Success[int, str](42))
    assert _check_slots(tf.Error[int, str]("x"))
    coro = _pending()
    assert _check_slots(tf.AsyncOutcome(coro))
    coro.close()
