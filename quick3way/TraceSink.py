from collections.abc import Sequence
from typing import Any, NamedTuple, Protocol


class TraceSink(Protocol):
    def on_partition_step(self, view: Sequence, lo: int, lt: int, gt: int, hi: int) -> None:
        ...


class SequenceView(Sequence):
    "Read-only window onto a sequence that keeps changing underneath"

    def __init__(self, seq: Sequence) -> None:
        self._seq = seq

    def __getitem__(self, i: int | slice) -> Any:
        if isinstance(i, slice):
            return tuple(self._seq[i])
        return self._seq[i]

    def __len__(self) -> int:
        return len(self._seq)

    __slots__ = ["_seq"]


class PartitionStep(NamedTuple):
    values: tuple
    lo: int
    lt: int
    gt: int
    hi: int

    @property
    def is_trivial(self) -> bool:
        return self.lo == self.lt == self.gt == self.hi


class RecordingTraceSink:
    def __init__(self) -> None:
        self.steps: list[PartitionStep] = []

    def on_partition_step(self, view: Sequence, lo: int, lt: int, gt: int, hi: int) -> None:
        self.steps.append(PartitionStep(tuple(view), lo, lt, gt, hi))


class PrintTraceSink:
    def __init__(self, fmt: str = "{}") -> None:
        self.fmt = fmt
        self.row = 0

    def format_row(self, view: Sequence, lo: int, lt: int, gt: int, hi: int) -> str:
        cells = []
        for k, x in enumerate(view):
            cell = self.fmt.format(x)
            if k == lt:
                cell = "[" + cell
            if k == gt:
                cell += "]"
            cells.append(cell if lo <= k <= hi else " " * len(cell))
        return f"{self.row:>4} lo={lo} lt={lt} gt={gt} hi={hi}: " + " ".join(cells)

    def on_partition_step(self, view: Sequence, lo: int, lt: int, gt: int, hi: int) -> None:
        print(self.format_row(view, lo, lt, gt, hi))
        self.row += 1
