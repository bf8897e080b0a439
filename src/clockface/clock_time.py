# src/clockface/clock_time.py

from collections import namedtuple
from datetime import datetime


class TimeSample(namedtuple("TimeSample", ["hour", "minute", "second"])):
    """
    A wall-clock reading on a 12-hour dial: hour 0-11, minute and second 0-59.
    """
    __slots__ = ()

    @classmethod
    def from_datetime(cls, moment):
        return cls(moment.hour % 12, moment.minute, moment.second)

    @property
    def hour_value(self):
        # Hour hand creeps between ticks: 3:30 -> 17.5 on the 0-60 scale
        return (self.hour + self.minute / 60.0) * 5

    @property
    def minute_value(self):
        return float(self.minute)

    @property
    def second_value(self):
        return float(self.second)


def system_time():
    """Read the local time fresh from the system clock."""
    return TimeSample.from_datetime(datetime.now())
