from .quick_sort_3way import InvalidWindowError, SortStats, partition, sort
from .TraceSink import PartitionStep, PrintTraceSink, RecordingTraceSink, SequenceView, TraceSink
