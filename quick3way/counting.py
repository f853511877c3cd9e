from typing import Any


class CmpCounter:
    """Counts element comparisons made through ``key``.

    Pass ``counter.key`` as the ``key=`` of a sort; every rich comparison between two
    wrapped elements bumps ``counter.cnt`` by one.
    """

    def __init__(self) -> None:
        self.cnt = 0
        counter = self

        # same shape as functools.cmp_to_key, counting instead of delegating to a cmp
        # fmt: off
        class K(object):
            __slots__ = ['obj']
            def __init__(self, obj):
                self.obj = obj
            def __lt__(self, other):
                counter.cnt += 1
                return self.obj < other.obj
            def __gt__(self, other):
                counter.cnt += 1
                return self.obj > other.obj
            def __eq__(self, other):
                counter.cnt += 1
                return self.obj == other.obj
            def __le__(self, other):
                counter.cnt += 1
                return self.obj <= other.obj
            def __ge__(self, other):
                counter.cnt += 1
                return self.obj >= other.obj
            __hash__ = None
        # fmt: on

        self.key = K

    def reset(self) -> int:
        cnt, self.cnt = self.cnt, 0
        return cnt

    def wrap(self, obj: Any) -> Any:
        return self.key(obj)
